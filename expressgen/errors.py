"""Exceptions raised while scaffolding a project.

Every error is fatal for the run: the CLI prints it and exits with status 1.
Nothing is retried and files already written are left in place.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class UserAbort(ScaffoldError):
    """Raised when the destination is not empty and the user declines."""

    def __init__(self, destination: str | Path) -> None:
        self.destination = str(destination)
        super().__init__(f"Destination is not empty: {self.destination}")


class TemplateAssetMissing(ScaffoldError):
    """Raised when a bundled template cannot be found (packaging defect)."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template asset not found: {name}")


class RenderFailure(ScaffoldError):
    """Raised when a template cannot be rendered."""

    def __init__(self, template: str, message: str) -> None:
        self.template = template
        super().__init__(f"Failed to render {template}: {message}")


class FilesystemWriteFailure(ScaffoldError):
    """Raised when a directory or file cannot be created."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot write {self.path}: {message}")
