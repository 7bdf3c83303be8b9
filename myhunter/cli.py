"""Command-line entry point of the game."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from . import config
from .game import run_game
from .textlib import write_error

_USAGE = (
    "USAGE:\n"
    "./my_hunter - launch the game\n"
    "-h : display this help message\n"
)


def usage() -> str:
    """The help text shown for ``-h``."""
    return _USAGE


def check_args(argv: Sequence[str]) -> bool:
    """Accept no arguments at all; report anything else on standard error."""
    if len(argv) > 1:
        write_error("To many arguments!\n")
        return False
    if not argv:
        return True
    write_error("invalid argument\n")
    return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game, or show help for ``-h``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args == ["-h"]:
        sys.stdout.write(usage())
        return config.SUCCESS_STATUS
    if not os.environ:
        return config.ERROR_STATUS
    if not check_args(args):
        return config.ERROR_STATUS
    return run_game()


if __name__ == "__main__":
    sys.exit(main())