"""Shared pytest fixtures for the expressgen test suite.

Provides reusable fixtures for:
- Empty and pre-populated destination directories
- A quiet filesystem collaborator
- A factory that runs the generator for a flag combination
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from expressgen.config import GeneratorConfig
from expressgen.scaffolder.filesystem import FileSystem
from expressgen.scaffolder.generator import GenerationResult, ProjectGenerator
from expressgen.scaffolder.options import resolve_options


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """An existing, empty destination directory."""
    destination = tmp_path / "empty-app"
    destination.mkdir()
    return destination


@pytest.fixture
def populated_dir(tmp_path: Path) -> Path:
    """A destination that already holds files."""
    destination = tmp_path / "existing-app"
    destination.mkdir()
    (destination / "app.js").write_text("// old app\n", encoding="utf-8")
    (destination / "notes.txt").write_text("keep me\n", encoding="utf-8")
    return destination


def _snapshot(root: Path) -> dict[str, str | None]:
    """Return ``{relative path: content}`` for every entry under *root*.

    Directories map to ``None``.
    """
    return {
        str(p.relative_to(root)): p.read_text(encoding="utf-8") if p.is_file() else None
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, str | None]]:
    """Callable returning the entries under a directory."""
    return _snapshot


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def quiet_fs() -> FileSystem:
    """Filesystem collaborator that does not print ``create`` lines."""
    return FileSystem(verbose=False)


def refuse(message: str) -> bool:
    raise AssertionError(f"unexpected prompt: {message}")


@pytest.fixture
def generate(config: GeneratorConfig, quiet_fs: FileSystem) -> Callable[..., GenerationResult]:
    """Run the generator for *destination* with the given flags.

    The confirmation callback fails the test unless one is supplied.
    """

    def _generate(
        destination: str | Path,
        confirm: Callable[[str], bool] = refuse,
        **flags: bool,
    ) -> GenerationResult:
        options = resolve_options(str(destination), config=config, **flags)
        return ProjectGenerator(options, config, fs=quiet_fs, confirm=confirm).generate()

    return _generate
