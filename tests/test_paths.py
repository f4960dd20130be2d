from __future__ import annotations

from nested_schema.utils.paths import (
    SET_POSITION,
    all_paths,
    format_path,
    get_in,
    is_subpath,
    subpaths,
)


def test_subpaths_are_prefixes_shortest_first():
    assert subpaths(("a", "b", "c")) == [("a",), ("a", "b"), ("a", "b", "c")]
    assert subpaths(()) == []


def test_is_subpath():
    assert is_subpath(("a",), ("a", "b"))
    assert is_subpath(("a", "b"), ("a", "b"))
    assert not is_subpath(("a", "b"), ("a",))
    assert not is_subpath(("b",), ("a", "b"))


def test_all_paths_lists_leaves_of_nested_maps():
    data = {"a": 1, "b": {"c": 2, "d": {}}, "e": [{"f": 1}]}
    assert sorted(all_paths(data)) == [("a",), ("b", "c"), ("b", "d"), ("e",)]


def test_all_paths_of_non_map_is_empty():
    assert all_paths([1, 2]) == []
    assert all_paths("abc") == []
    assert all_paths({}) == []


def test_get_in_distinguishes_missing_from_none():
    missing = object()
    assert get_in({"a": {"b": None}}, ("a", "b"), missing) is None
    assert get_in({"a": 1}, ("a", "b"), missing) is missing
    assert get_in({"a": {}}, ("a", "b"), missing) is missing
    assert get_in({"a": {}}, ("a", ["unhashable"]), missing) is missing
    assert get_in({"a": 1}, (), missing) == {"a": 1}


def test_format_path():
    assert format_path(("a", SET_POSITION, 0)) == "['a', *, 0]"
    assert format_path(()) == "[]"
