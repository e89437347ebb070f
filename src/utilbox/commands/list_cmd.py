"""List the resources visible from a package or directory."""

from __future__ import annotations

from argparse import Namespace

from utilbox.commands import resource_context
from utilbox.io.resources import list_resources


def run(args: Namespace) -> None:
    """Run the list command."""
    patterns = list(getattr(args, "patterns", None) or [])
    names = list_resources(resource_context(args), patterns or None)
    if not names:
        print("(no resources)")
        return
    for name in names:
        print(name)
