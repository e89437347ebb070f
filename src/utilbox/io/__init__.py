"""I/O helpers: text streams, files, package resources, properties, console input."""

from utilbox.io.properties import (
    create_properties_from_resource,
    load_properties_from_resource,
    load_properties_from_resources,
    read_properties_from_resource,
)
from utilbox.io.resources import (
    DirectoryResolver,
    PackageResolver,
    ResourceNotFoundError,
    ResourceResolver,
    get_resource_as_stream,
    list_resources,
    read_resource_as_lines,
    read_resource_as_string,
    resolver_for,
    resource_to_file,
)
from utilbox.io.streams import (
    get_user_input,
    read_all_as_lines,
    read_all_as_string,
    read_file_as_string,
)

__all__ = [
    "DirectoryResolver",
    "PackageResolver",
    "ResourceNotFoundError",
    "ResourceResolver",
    "create_properties_from_resource",
    "get_resource_as_stream",
    "get_user_input",
    "list_resources",
    "load_properties_from_resource",
    "load_properties_from_resources",
    "read_all_as_lines",
    "read_all_as_string",
    "read_file_as_string",
    "read_properties_from_resource",
    "read_resource_as_lines",
    "read_resource_as_string",
    "resolver_for",
    "resource_to_file",
]
