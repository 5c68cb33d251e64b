"""Shared console helpers for expressgen.

Rich-based reporting of created paths, warnings and the post-run
instructions, plus the interactive confirmation prompt.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes", "ok", "true"})


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------


def is_affirmative(answer: str) -> bool:
    """Return ``True`` for ``y``, ``yes``, ``ok`` or ``true`` in any case."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def confirm(message: str) -> bool:
    """Ask *message* on stdout and read one line from stdin.

    Blocks until a line is received.  End of input counts as a refusal.
    """
    try:
        answer = console.input(escape(message))
    except EOFError:
        return False
    return is_affirmative(answer)


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def print_created(path: str | Path, *, directory: bool = False) -> None:
    """Report a created file or directory."""
    suffix = os.sep if directory else ""
    console.print(f"   [cyan]create[/cyan] : {escape(str(path))}{suffix}")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def launched_from_cmd() -> bool:
    """Return ``True`` when running under Windows ``cmd.exe``."""
    return sys.platform == "win32" and os.environ.get("_") is None


def print_next_steps(app_name: str, destination: str) -> None:
    """Print how to enter, install and start the generated app."""
    from_cmd = launched_from_cmd()
    prompt = ">" if from_cmd else "$"

    if destination != ".":
        console.print()
        console.print("   change directory:")
        console.print(f"     {prompt} cd {escape(destination)}")

    console.print()
    console.print("   install dependencies:")
    console.print(f"     {prompt} npm install")
    console.print()
    console.print("   run the app:")
    if from_cmd:
        console.print(f"     {prompt} SET DEBUG={app_name}:* & npm start")
    else:
        console.print(f"     {prompt} DEBUG={app_name}:* npm start")
    console.print()
