"""Loading Java-style .properties resources into dicts."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import javaproperties

from utilbox.io.resources import ResourceNotFoundError, resolver_for

logger = logging.getLogger(__name__)


def read_properties_from_resource(
    properties: MutableMapping[str, str],
    context: Any,
    name: str | None,
) -> None:
    """
    Load the properties in a resource into properties (later keys overwrite earlier ones).

    context cannot be None (ValueError). If name is None nothing happens. A
    missing resource raises ResourceNotFoundError. The resource is read as
    ISO-8859-1 with \\uXXXX escapes, as the .properties format prescribes.
    """
    if context is None:
        raise ValueError("context cannot be None")
    if name is None:
        return
    resolver = resolver_for(context)
    stream = resolver.open(name)
    if stream is None:
        raise ResourceNotFoundError(f"{name} not found.", resource=name, context=str(resolver))
    with stream:
        loaded = javaproperties.load(stream)
    properties.update(loaded)
    logger.debug("Loaded %d properties from %s in %s", len(loaded), name, resolver)


def create_properties_from_resource(context: Any, name: str | None) -> dict[str, str]:
    """New dict holding the properties in a resource (empty if name is None)."""
    result: dict[str, str] = {}
    read_properties_from_resource(result, context, name)
    return result


def load_properties_from_resource(context: Any, name: str | None) -> dict[str, str]:
    return create_properties_from_resource(context, name)


def load_properties_from_resources(
    context: Any,
    names: list[str | None] | None,
) -> list[dict[str, str]] | None:
    """One dict per resource name, in order. None if names is None."""
    if names is None:
        return None
    return [load_properties_from_resource(context, name) for name in names]
