"""Helpers for sequences and 2D arrays: joining, formatting, copy/fill, membership, conversion."""

from __future__ import annotations

from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")


def join(values: Sequence[Any] | None, separator: str | None) -> str:
    """
    Concatenate str() of each element with separator between consecutive elements.

    None values gives "" and a None separator is treated as "". A None element
    renders as nothing but still takes its place between separators, so
    join(["a", None, "b"], ",") is "a,,b".
    """
    if separator is None:
        separator = ""
    if values is None:
        return ""
    return separator.join("" if v is None else str(v) for v in values)


def join_numbers(values: Sequence[float] | None, separator: str | None) -> str:
    """Like join(), but every element is rendered (nothing is treated as missing)."""
    if separator is None:
        separator = ""
    if values is None:
        return ""
    return separator.join(str(v) for v in values)


def format_sequence(values: Sequence[Any] | None) -> str:
    """Format like a collection repr: "[a, b]", or "null" for None."""
    if values is None:
        return "null"
    return "[" + join(values, ", ") + "]"


def matrix_copy(src: Sequence[Sequence[Any]] | None, dest: Sequence[list[Any]] | None) -> None:
    """
    Copy each row of src into the same row of dest, in place. No-op if either is None.

    Destination rows are never resized: a row shorter than its source row raises
    IndexError before anything is written to it.
    """
    if src is None or dest is None:
        return
    for i, row in enumerate(src):
        target = dest[i]
        n = len(row)
        if len(target) < n:
            raise IndexError(
                f"Destination row {i} has length {len(target)}, source row has {n}"
            )
        target[:n] = row


def matrix_fill(matrix: Sequence[list[Any] | None] | None, value: Any) -> None:
    """Set every cell to value. No-op on None; None rows are skipped."""
    if matrix is None:
        return
    for row in matrix:
        if row is None:
            continue
        for j in range(len(row)):
            row[j] = value


def contains(values: Iterable[Any] | None, target: Any) -> bool:
    """True if some element is target or equals it. None values gives False."""
    if values is None:
        return False
    for item in values:
        if item is target or (item is not None and item == target):
            return True
    return False


def as_set(strings: Iterable[str] | None) -> set[str] | None:
    """Unique strings as a set, or None for None."""
    if strings is None:
        return None
    return set(strings)


def add_all(collection: Any, *arrays: Iterable[T]) -> None:
    """
    Add every element of every array to collection, arrays in order, then elements in order.

    Uses append() when the collection has it (lists, deques) and add() otherwise
    (sets). Raises ValueError if collection is None. The arrays themselves are not
    checked; a None array fails with TypeError when iterated.
    """
    if collection is None:
        raise ValueError("collection cannot be None")
    add = collection.append if hasattr(collection, "append") else collection.add
    for arr in arrays:
        for item in arr:
            add(item)


def as_list(*arrays: Sequence[T]) -> list[T]:
    """New list with the contents of the given arrays. Raises ValueError on a None array."""
    for arr in arrays:
        if arr is None:
            raise ValueError("None arrays not allowed")
    result: list[T] = []
    add_all(result, *arrays)
    return result
