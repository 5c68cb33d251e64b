"""Command-line entry point.

Usage::

    expressgen my-app --pg --dev
    python -m expressgen . --git --test
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from expressgen import __version__
from expressgen.config import GeneratorConfig
from expressgen.errors import ScaffoldError, UserAbort
from expressgen.scaffolder.generator import ProjectGenerator
from expressgen.scaffolder.options import resolve_options
from expressgen.utils import console, print_error, print_next_steps


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``expressgen``."""
    parser = argparse.ArgumentParser(
        prog="expressgen",
        usage="%(prog)s [options] [dir]",
        description="Express application generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  expressgen\n"
            "  expressgen my-app --git\n"
            "  expressgen my-app --pg --dev --test\n"
        ),
    )
    parser.add_argument(
        "dir",
        nargs="?",
        default=".",
        help="Destination directory (default: current directory)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--git", action="store_true", help="add .gitignore")
    parser.add_argument(
        "-p", "--pg",
        action="store_true",
        help="setup PostgreSQL database connection",
    )
    parser.add_argument(
        "-d", "--dev",
        action="store_true",
        help="create a development mode",
    )
    parser.add_argument(
        "-t", "--test",
        action="store_true",
        help="create a test environment",
    )
    parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="force on non-empty directory",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    confirm: Callable[[str], bool] | None = None,
) -> int:
    """CLI entry point.  Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = GeneratorConfig.from_env()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1

    options = resolve_options(
        args.dir,
        git=args.git,
        pg=args.pg,
        dev=args.dev,
        test=args.test,
        force=args.force,
        config=config,
    )

    console.print()
    try:
        ProjectGenerator(options, config, confirm=confirm).generate()
    except UserAbort:
        print_error("aborting")
        return 1
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return 1

    print_next_steps(options.app_name, options.destination)
    return 0


if __name__ == "__main__":
    sys.exit(main())
