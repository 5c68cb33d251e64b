"""Template loading and Jinja2 rendering for project scaffolding.

Provides :class:`TemplateStore`, which reads the bundled assets under
``expressgen/scaffolder/templates/``, and :class:`TemplateRenderer`, which
expands ``.j2`` templates against a binding dictionary.  Literal assets are
copied as-is; only the parameterised ones go through Jinja2.
"""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError, Undefined
from pydantic import BaseModel

from expressgen.config import DEFAULT_TEMPLATE_DIR
from expressgen.errors import RenderFailure, TemplateAssetMissing


# ---------------------------------------------------------------------------
# TemplateStore
# ---------------------------------------------------------------------------


class TemplateStore:
    """Read-only access to the bundled template files.

    Names are POSIX-style paths relative to the template root, e.g.
    ``"js/app.js.j2"`` or ``"css/style.css"``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)

    def path_of(self, name: str) -> Path:
        """Return the on-disk path of template *name*."""
        return self.template_dir / name

    def load(self, name: str) -> str:
        """Return the raw text of template *name*.

        Raises:
            TemplateAssetMissing: If the asset is not bundled.
        """
        path = self.path_of(name)
        if not path.is_file():
            raise TemplateAssetMissing(name)
        return path.read_text(encoding="utf-8")

    def list_files(self, category_dir: str, pattern: str) -> list[str]:
        """Return the file names in *category_dir* matching *pattern*.

        The scan is not recursive, the match is case-sensitive, and the
        result is sorted so repeated runs copy files in the same order.
        """
        directory = self.path_of(category_dir)
        if not directory.is_dir():
            raise TemplateAssetMissing(category_dir)
        return sorted(
            entry.name
            for entry in directory.iterdir()
            if entry.is_file() and fnmatch.fnmatchcase(entry.name, pattern)
        )


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    Plain strings are interpolated verbatim.  Any other value reaching a
    ``{{ ... }}`` expression is printed as JavaScript source by
    :func:`to_source`, so lists and mappings come out as array and object
    literals.  The ``js`` filter forces the same conversion for strings,
    producing a quoted literal.
    """

    def __init__(self, store: TemplateStore | None = None) -> None:
        self.store = store or TemplateStore()
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            finalize=_finalize,
        )
        self.env.filters["js"] = to_source

    def render(
        self,
        template_text: str,
        bindings: Mapping[str, Any],
        *,
        name: str = "<string>",
    ) -> str:
        """Render *template_text* with the provided bindings.

        Raises:
            RenderFailure: On malformed template syntax or a missing binding.
        """
        try:
            template = self.env.from_string(template_text)
            return template.render(**bindings)
        except (TemplateError, TypeError) as exc:
            raise RenderFailure(name, str(exc)) from exc

    def render_template(self, name: str, bindings: Mapping[str, Any]) -> str:
        """Load template *name* from the store and render it."""
        return self.render(self.store.load(name), bindings, name=name)


# ---------------------------------------------------------------------------
# JavaScript source formatting
# ---------------------------------------------------------------------------

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def to_source(value: Any) -> str:
    """Format *value* as a JavaScript literal.

    Handles the shapes bound by the generator: strings, booleans, ``None``,
    numbers, sequences, mappings and pydantic models (as mappings).

    Examples::

        to_source("app:server")       -> "'app:server'"
        to_source(["a", 1])           -> "[ 'a', 1 ]"
        to_source({"path": "/users"}) -> "{ path: '/users' }"
    """
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        items = ", ".join(
            f"{_object_key(str(key))}: {to_source(item)}" for key, item in value.items()
        )
        return "{ " + items + " }"
    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        return "[ " + ", ".join(to_source(item) for item in value) + " ]"
    raise TypeError(f"Cannot format {type(value).__name__} as JavaScript source")


def _finalize(value: Any) -> Any:
    if isinstance(value, (str, Undefined)):
        return value
    return to_source(value)


def _object_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else _quote(key)


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f"'{escaped}'"
