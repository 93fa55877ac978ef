"""
Summary: Tests for PathList insertion policies, parsing and formatting.
Why: Guard ordering and uniqueness rules every edit operation relies on.
"""

from __future__ import annotations

import pytest

from pathedit.features.pathlist import PathList, format_path, parse_raw, parse_unique


def test_insert_unique_skips_empty_and_existing() -> None:
    """insert_unique appends new values only and never moves existing ones."""

    path = PathList()
    path.insert_unique("")
    assert path == []

    for directory in ("a", "b", "c"):
        path.insert_unique(directory)
    assert path == ["a", "b", "c"]

    for directory in ("c", "b", "a"):
        path.insert_unique(directory)
    assert path == ["a", "b", "c"]


@pytest.mark.parametrize("directory", ["a", "z", ""])
def test_insert_unique_is_idempotent(directory: str) -> None:
    """Inserting the same value twice equals inserting it once."""

    once = PathList(["a", "b"])
    once.insert_unique(directory)
    twice = PathList(once)
    twice.insert_unique(directory)
    assert twice == once


def test_insert_last_moves_existing_entry_to_end() -> None:
    """insert_last displaces an existing entry to the back."""

    path = PathList(["a", "b", "c"])
    path.insert_last("a")
    assert path == ["b", "c", "a"]

    path.insert_last("d")
    assert path == ["b", "c", "a", "d"]


def test_remove_ignores_missing_values() -> None:
    """Removing an absent value leaves the list unchanged."""

    path = PathList(["a", "b"])
    path.remove("x")
    assert path == ["a", "b"]

    path.remove("a")
    assert path == ["b"]


def test_parse_unique_drops_empty_segments_and_duplicates() -> None:
    """Empty segments vanish and the first occurrence keeps its position."""

    assert parse_unique("") == []
    assert parse_unique("::") == []
    assert parse_unique("a:b:c") == ["a", "b", "c"]
    assert parse_unique(":a::b:") == ["a", "b"]
    assert parse_unique("a:b:a:c:b") == ["a", "b", "c"]
    assert parse_unique("/foo:/bar:/foo:/baz:/bar") == ["/foo", "/bar", "/baz"]


def test_parse_raw_keeps_duplicates() -> None:
    """The raw parse keeps every occurrence in order."""

    assert parse_raw("a:b:a") == ["a", "b", "a"]
    assert parse_raw(":/foo::/bar:/foo:") == ["/foo", "/bar", "/foo"]
    assert parse_raw("") == []


def test_format_joins_with_colons() -> None:
    """Formatting joins entries and renders an empty list as an empty string."""

    assert format_path([]) == ""
    assert PathList(["/usr/bin", "/bin"]).format() == "/usr/bin:/bin"


@pytest.mark.parametrize(
    "source",
    ["", "a", ":a::b:", "a:b:a:c:b", "/usr/bin:/bin:/usr/bin:"],
)
def test_parse_format_round_trip_is_stable(source: str) -> None:
    """Re-parsing a formatted list yields the same list."""

    parsed = parse_unique(source)
    assert parse_unique(format_path(parsed)) == parsed


def test_iteration_does_not_expose_internal_list() -> None:
    """Mutating while iterating over a snapshot is safe."""

    path = PathList(["a", "b"])
    for directory in path:
        path.remove(directory)
    assert len(path) == 0
    assert "a" not in path
