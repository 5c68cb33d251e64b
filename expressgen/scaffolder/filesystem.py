"""Filesystem operations used by the project generator.

All calls are synchronous and report each created path on the console.
Failures are raised as :class:`FilesystemWriteFailure`; nothing is retried.
"""

from __future__ import annotations

from pathlib import Path

from expressgen.errors import FilesystemWriteFailure
from expressgen.utils import print_created


class FileSystem:
    """Thin wrapper over :mod:`pathlib` for directory and file creation."""

    def __init__(self, *, verbose: bool = True) -> None:
        self.verbose = verbose

    def make_dir(self, path: str | Path, mode: int = 0o755) -> Path:
        """Create *path* and any missing parents."""
        target = Path(path)
        try:
            target.mkdir(mode=mode, parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemWriteFailure(target, exc.strerror or str(exc)) from exc
        if self.verbose:
            print_created(target, directory=True)
        return target

    def list_dir(self, path: str | Path) -> list[str]:
        """Return the entry names in *path*.

        Raises:
            FileNotFoundError: If *path* does not exist.
            FilesystemWriteFailure: If *path* cannot be listed.
        """
        target = Path(path)
        try:
            return sorted(entry.name for entry in target.iterdir())
        except FileNotFoundError:
            raise
        except OSError as exc:
            raise FilesystemWriteFailure(target, exc.strerror or str(exc)) from exc

    def write(self, path: str | Path, content: str, mode: int | None = None) -> Path:
        """Write *content* to *path*, then apply *mode* when given."""
        target = Path(path)
        try:
            target.write_text(content, encoding="utf-8")
            if mode is not None:
                target.chmod(mode)
        except OSError as exc:
            raise FilesystemWriteFailure(target, exc.strerror or str(exc)) from exc
        if self.verbose:
            print_created(target)
        return target

