"""Resolve the raw CLI input into a :class:`ProjectOptions` record."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from expressgen.config import GeneratorConfig

_INVALID_CHARS_RE = re.compile(r"[^A-Za-z0-9.-]+")
_EDGE_RE = re.compile(r"^[-_.]+|-+$")


class ProjectOptions(BaseModel):
    """Normalised options for one generation run."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    destination: str = "."
    git: bool = False
    pg: bool = False
    dev: bool = False
    test: bool = False
    force: bool = False


def create_app_name(path_name: str | Path) -> str:
    """Create an npm-compatible app name from a directory path.

    Takes the last path component, replaces runs of characters outside
    ``[A-Za-z0-9.-]`` with ``-``, strips leading ``-``/``_``/``.`` and
    trailing ``-``, then lowercases.  May return an empty string.

    Examples::

        create_app_name("/tmp/My App!")  -> "my-app"
        create_app_name("__private")     -> "private"
    """
    base = Path(path_name).name
    name = _INVALID_CHARS_RE.sub("-", base)
    name = _EDGE_RE.sub("", name)
    return name.lower()


def resolve_options(
    destination: str | None = None,
    *,
    git: bool = False,
    pg: bool = False,
    dev: bool = False,
    test: bool = False,
    force: bool = False,
    config: GeneratorConfig | None = None,
) -> ProjectOptions:
    """Build the options record for *destination* and the feature flags.

    Any destination is accepted; an empty one means the current directory.
    """
    config = config or GeneratorConfig()
    destination = destination or "."
    app_name = create_app_name(Path(destination).resolve()) or config.default_app_name
    return ProjectOptions(
        app_name=app_name,
        destination=destination,
        git=git,
        pg=pg,
        dev=dev,
        test=test,
        force=force,
    )
