"""
Named resources: resolution against packages or directories, reading, and temp-file copies.

A resource name is a "/"-separated path relative to a resolution context. The
context is a package (the default is utilbox itself), a module, a class, a
directory, or any object implementing ResourceResolver. A leading "/" makes a
name absolute: for packages its first segment names the top-level package, for
directories it is relative to the root.
"""

from __future__ import annotations

import atexit
import contextlib
import importlib
import io
import logging
import os
import shutil
import sys
import tempfile
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any, BinaryIO, Iterator, Protocol, TextIO, runtime_checkable

from pathspec import PathSpec

from utilbox.config import DEFAULT_ENCODING, DEFAULT_PACKAGE
from utilbox.io.streams import read_all_as_lines, read_all_as_string

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)

# Suffix used by resource_to_file when none is given
DEFAULT_TEMP_SUFFIX = ".tmp"


class ResourceNotFoundError(FileNotFoundError):
    """Raised when a resource name resolves to nothing. Carries the name and the context."""

    def __init__(self, message: str, resource: str | None = None, context: str | None = None) -> None:
        super().__init__(message)
        self.resource = resource
        self.context = context


@runtime_checkable
class ResourceResolver(Protocol):
    """Protocol for resource lookup scopes."""

    def open(self, name: str) -> BinaryIO | None:
        """Open the named resource for binary reading, or return None if there is none."""
        ...

    def names(self) -> Iterator[str]:
        """Yield the "/"-separated names of all resources in this scope."""
        ...


def _split_name(name: str) -> list[str] | None:
    """Path segments of a resource name; None if it tries to climb out of its scope."""
    parts = [p for p in name.split("/") if p and p != "."]
    if ".." in parts:
        return None
    return parts


def _walk(node: Traversable, prefix: str) -> Iterator[str]:
    for child in node.iterdir():
        if child.is_dir():
            if child.name == "__pycache__":
                continue
            yield from _walk(child, f"{prefix}{child.name}/")
        elif child.is_file():
            yield f"{prefix}{child.name}"


class TraversableResolver(ABC):
    """Base for resolvers backed by a directory-like tree (a package or a filesystem path)."""

    @abstractmethod
    def _root(self) -> Traversable | None:
        """Top of the tree, or None if it cannot be located."""

    def _locate(self, name: str) -> Traversable | None:
        parts = _split_name(name)
        node = self._root()
        if parts is None or node is None:
            return None
        for part in parts:
            node = node.joinpath(part)
        return node

    def open(self, name: str) -> BinaryIO | None:
        resource = self._locate(name)
        if resource is None or not resource.is_file():
            logger.debug("No resource %s in %s", name, self)
            return None
        return resource.open("rb")

    def names(self) -> Iterator[str]:
        root = self._root()
        if root is None or not root.is_dir():
            return
        yield from _walk(root, "")


def _module_root(module: ModuleType) -> Traversable | None:
    """Resource tree for a module: the package itself, or the package containing it."""
    if hasattr(module, "__path__"):
        return resources.files(module)
    spec = module.__spec__
    if spec is not None and spec.parent:
        return resources.files(spec.parent)
    # Top-level module: its own directory
    file = getattr(module, "__file__", None)
    return Path(file).parent if file else None


def _package_root(package: str) -> Traversable | None:
    if not package:
        return None
    try:
        module = importlib.import_module(package)
    except ImportError:
        logger.debug("Cannot import %s for resource lookup", package)
        return None
    return _module_root(module)


class PackageResolver(TraversableResolver):
    """Resolves names against an importable package (or a module's containing package)."""

    def __init__(self, package: str) -> None:
        self.package = package

    def __repr__(self) -> str:
        return f"PackageResolver({self.package!r})"

    def __str__(self) -> str:
        return self.package

    def _root(self) -> Traversable | None:
        return _package_root(self.package)

    def _locate(self, name: str) -> Traversable | None:
        if not name.startswith("/"):
            return super()._locate(name)
        parts = _split_name(name)
        # Absolute: "/<top-level package>/<path>"
        if parts is None or len(parts) < 2:
            return None
        node = _package_root(parts[0])
        if node is None:
            return None
        for part in parts[1:]:
            node = node.joinpath(part)
        return node


class DirectoryResolver(TraversableResolver):
    """Resolves names against a filesystem directory."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def __repr__(self) -> str:
        return f"DirectoryResolver({self.root.as_posix()!r})"

    def __str__(self) -> str:
        return self.root.as_posix()

    def _root(self) -> Traversable | None:
        return self.root


def resolver_for(context: Any = None) -> ResourceResolver:
    """
    Return the resolver for a resolution context.

    None -> the utilbox package; str -> package or module name; module -> its
    package; class -> the package of the module defining it; path -> directory;
    a ResourceResolver is returned unchanged. Raises TypeError for anything else.
    """
    if context is None:
        return PackageResolver(DEFAULT_PACKAGE)
    if isinstance(context, str):
        return PackageResolver(context)
    if isinstance(context, os.PathLike):
        return DirectoryResolver(context)
    if isinstance(context, ModuleType):
        if hasattr(context, "__path__"):
            return PackageResolver(context.__name__)
        spec = context.__spec__
        if spec is not None and spec.parent:
            return PackageResolver(spec.parent)
        file = getattr(context, "__file__", None)
        if file:
            return DirectoryResolver(Path(file).parent)
        return PackageResolver(context.__name__)
    if isinstance(context, type):
        module = sys.modules.get(context.__module__)
        if module is not None:
            return resolver_for(module)
        return PackageResolver(context.__module__)
    if isinstance(context, ResourceResolver):
        return context
    raise TypeError(f"Unsupported resource context: {type(context).__name__}")


def get_resource_as_stream(name: str, context: Any = None) -> BinaryIO:
    """
    Open a resource for binary reading. The caller owns (and must close) the stream.

    Raises ValueError if name is None and ResourceNotFoundError, naming both the
    resource and the context, if nothing is found.
    """
    if name is None:
        raise ValueError("resource cannot be None")
    resolver = resolver_for(context)
    stream = resolver.open(name)
    if stream is None:
        raise ResourceNotFoundError(
            f"Could not open resource {name} using {resolver}",
            resource=name,
            context=str(resolver),
        )
    return stream


def _open_text(name: str, context: Any, encoding: str) -> TextIO:
    stream = get_resource_as_stream(name, context)
    try:
        return io.TextIOWrapper(stream, encoding=encoding, newline="")
    except BaseException:
        stream.close()
        raise


def read_resource_as_string(
    context: Any,
    name: str | None,
    encoding: str = DEFAULT_ENCODING,
) -> str | None:
    """Read a whole text resource. Returns None if name is None."""
    if name is None:
        return None
    with _open_text(name, context, encoding) as reader:
        return read_all_as_string(reader)


def read_resource_as_lines(
    context: Any,
    name: str,
    encoding: str = DEFAULT_ENCODING,
) -> list[str]:
    """
    Read a text resource as a list of lines (terminators stripped).

    If reading fails, an error from closing the resource is suppressed so the
    read error is the one raised.
    """
    reader = _open_text(name, context, encoding)
    try:
        lines = read_all_as_lines(reader)
    except BaseException:
        with contextlib.suppress(OSError):
            reader.close()
        raise
    reader.close()
    return lines


def _delete_at_exit(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug("Could not delete temporary file %s: %s", path, e)


def resource_to_file(
    name: str,
    file_prefix: str,
    file_suffix: str | None,
    context: Any = None,
    directory: str | os.PathLike[str] | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> Path:
    """
    Copy a text resource into a new temporary file and return its path.

    The file is named <file_prefix><random><file_suffix> (suffix defaults to
    ".tmp"), lives in directory or the system temp dir, and is deleted when the
    interpreter exits. Raises ValueError if file_prefix is None.
    """
    if file_prefix is None:
        raise ValueError("file_prefix cannot be None")
    if file_suffix is None:
        file_suffix = DEFAULT_TEMP_SUFFIX
    with _open_text(name, context, encoding) as reader:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            newline="",
            prefix=file_prefix,
            suffix=file_suffix,
            dir=directory,
            delete=False,
        ) as writer:
            path = Path(writer.name)
            atexit.register(_delete_at_exit, path)
            shutil.copyfileobj(reader, writer)
    logger.debug("Copied resource %s to %s", name, path)
    return path


def list_resources(context: Any = None, patterns: list[str] | None = None) -> list[str]:
    """
    Sorted names of the resources visible from context.

    With patterns (gitignore syntax), only names matching them are returned.
    """
    names = sorted(resolver_for(context).names())
    if not patterns:
        return names
    spec = PathSpec.from_lines("gitignore", patterns)
    return [n for n in names if spec.match_file(n)]
