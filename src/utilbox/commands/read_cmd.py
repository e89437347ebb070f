"""Print a text resource, whole or as numbered lines."""

from __future__ import annotations

import sys
from argparse import Namespace

from utilbox.commands import fail, resource_context
from utilbox.config import DEFAULT_ENCODING
from utilbox.io.resources import read_resource_as_lines, read_resource_as_string


def run(args: Namespace) -> None:
    """Run the read command."""
    config = getattr(args, "config_data", None) or {}
    encoding = getattr(args, "encoding", None) or config.get("encoding") or DEFAULT_ENCODING
    context = resource_context(args)
    try:
        if getattr(args, "lines", False):
            lines = read_resource_as_lines(context, args.name, encoding=encoding)
            width = len(str(len(lines)))
            for i, line in enumerate(lines, start=1):
                print(f"{i:>{width}}  {line}")
        else:
            sys.stdout.write(read_resource_as_string(context, args.name, encoding=encoding) or "")
    except (OSError, UnicodeDecodeError, LookupError) as e:
        fail(str(e))
