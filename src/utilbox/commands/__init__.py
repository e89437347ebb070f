"""CLI subcommands. Each module exposes run(args)."""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import Any, NoReturn

from utilbox.config import DEFAULT_PACKAGE


def resource_context(args: Namespace) -> Any:
    """Resolution context selected by --dir / --package (default: the utilbox package)."""
    directory = getattr(args, "directory", None)
    if directory is not None:
        return directory
    return getattr(args, "package", None) or DEFAULT_PACKAGE


def fail(message: str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)
