"""Unit tests for arrays (join, format, matrix copy/fill, contains, set/list conversion)."""

from __future__ import annotations

from collections import deque

import pytest

from utilbox.arrays import (
    add_all,
    as_list,
    as_set,
    contains,
    format_sequence,
    join,
    join_numbers,
    matrix_copy,
    matrix_fill,
)


# --- join ---


def test_join_places_separator_between_elements() -> None:
    assert join(["a", "b", "c"], ", ") == "a, b, c"
    assert join(["a", "b", "c"], "-").count("-") == 2


def test_join_none_values_returns_empty() -> None:
    assert join(None, ",") == ""
    assert join(None, None) == ""


def test_join_none_separator_is_empty() -> None:
    assert join(["a", "b"], None) == join(["a", "b"], "") == "ab"


def test_join_none_elements_keep_separator_slot() -> None:
    """None renders as nothing but separators stay positional."""
    assert join(["a", None, "b"], ",") == "a,,b"
    assert join([None, None], ",") == ","


def test_join_single_and_empty() -> None:
    assert join(["only"], ",") == "only"
    assert join([], ",") == ""


def test_join_uses_str_of_elements() -> None:
    assert join([1, 2.5, True], " ") == "1 2.5 True"


def test_join_numbers_renders_every_element() -> None:
    assert join_numbers([1.0, 2.5, -3.0], ",") == "1.0,2.5,-3.0"
    assert join_numbers([], ",") == ""
    assert join_numbers(None, ",") == ""
    assert join_numbers([1.0, 2.0], None) == "1.02.0"


# --- format_sequence ---


def test_format_sequence() -> None:
    assert format_sequence(None) == "null"
    assert format_sequence([]) == "[]"
    assert format_sequence([1, 2]) == "[1, 2]"
    assert format_sequence(("x", None, "z")) == "[x, , z]"


# --- matrix_copy ---


def test_matrix_copy_copies_rows_in_place() -> None:
    src = [[1, 2], [3]]
    dest = [[0, 0, 9], [0, 8]]
    row0 = dest[0]
    matrix_copy(src, dest)
    assert dest == [[1, 2, 9], [3, 8]]
    assert dest[0] is row0


def test_matrix_copy_none_is_noop() -> None:
    dest = [[0]]
    matrix_copy(None, dest)
    matrix_copy([[1]], None)
    assert dest == [[0]]


def test_matrix_copy_short_destination_row_raises() -> None:
    """Destination rows are never resized."""
    dest = [[0]]
    with pytest.raises(IndexError):
        matrix_copy([[1, 2]], dest)
    assert dest == [[0]]


def test_matrix_copy_missing_destination_row_raises() -> None:
    with pytest.raises(IndexError):
        matrix_copy([[1], [2]], [[0]])


# --- matrix_fill ---


def test_matrix_fill_sets_every_cell() -> None:
    matrix = [[0] * 4 for _ in range(3)]
    matrix_fill(matrix, "x")
    assert all(cell == "x" for row in matrix for cell in row)
    assert sum(len(row) for row in matrix) == 12


def test_matrix_fill_skips_none_rows() -> None:
    matrix = [[1, 2], None, [3]]
    matrix_fill(matrix, 0)
    assert matrix == [[0, 0], None, [0]]


def test_matrix_fill_none_is_noop() -> None:
    matrix_fill(None, 1)


# --- contains ---


def test_contains_by_equality_and_identity() -> None:
    target = object()
    assert contains(["a", "b"], "b") is True
    assert contains([1, 2, 3], 2.0) is True
    assert contains([target], target) is True
    assert contains(["a"], "z") is False


def test_contains_none_target_matches_none_element() -> None:
    assert contains(["a", None], None) is True
    assert contains(["a"], None) is False


def test_contains_none_values_is_false() -> None:
    assert contains(None, "a") is False
    assert contains(None, None) is False


# --- as_set ---


def test_as_set_collapses_duplicates() -> None:
    result = as_set(["a", "b", "a"])
    assert result == {"a", "b"}
    assert len(result) == 2


def test_as_set_none() -> None:
    assert as_set(None) is None
    assert as_set([]) == set()


# --- add_all ---


def test_add_all_preserves_order() -> None:
    target = ["start"]
    add_all(target, ["a", "b"], ("c",), [])
    assert target == ["start", "a", "b", "c"]


def test_add_all_into_set_and_deque() -> None:
    s: set[str] = set()
    add_all(s, ["a", "b"], ["a"])
    assert s == {"a", "b"}
    d: deque[int] = deque()
    add_all(d, [1], [2, 3])
    assert list(d) == [1, 2, 3]


def test_add_all_no_arrays_is_noop() -> None:
    target = [1]
    add_all(target)
    assert target == [1]


def test_add_all_none_collection_raises() -> None:
    with pytest.raises(ValueError, match="collection cannot be None"):
        add_all(None, ["a"])


def test_add_all_none_array_is_not_validated() -> None:
    """No up-front check: elements before the None array are already added."""
    target: list[str] = []
    with pytest.raises(TypeError):
        add_all(target, ["a"], None)
    assert target == ["a"]


# --- as_list ---


def test_as_list_concatenates_in_order() -> None:
    assert as_list(["a"], ["b", "c"]) == ["a", "b", "c"]
    assert as_list() == []


def test_as_list_returns_new_list() -> None:
    src = ["a"]
    result = as_list(src)
    result.append("b")
    assert src == ["a"]


def test_as_list_none_array_raises() -> None:
    with pytest.raises(ValueError, match="None arrays not allowed"):
        as_list(["a"], None)
