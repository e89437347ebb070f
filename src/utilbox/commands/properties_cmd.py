"""Print the entries of a .properties resource."""

from __future__ import annotations

from argparse import Namespace

from utilbox.commands import fail, resource_context
from utilbox.io.properties import create_properties_from_resource


def run(args: Namespace) -> None:
    """Run the properties command."""
    try:
        properties = create_properties_from_resource(resource_context(args), args.name)
    except OSError as e:
        fail(str(e))
    for key, value in properties.items():
        print(f"{key}={value}")
