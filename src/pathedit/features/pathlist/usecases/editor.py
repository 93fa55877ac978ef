"""
Summary: Edit operations that build a new path list from the current one and arguments.
Why: Keep merge ordering rules free of filesystem access so they never fail.
"""

from __future__ import annotations

from collections.abc import Iterable

from pathedit.features.pathlist.domain.path_list import PathList, parse_unique


def merge_arguments(path: PathList, directories: Iterable[str]) -> PathList:
    """Merge compound path arguments into ``path`` with last-mention-wins placement.

    Each argument is parsed as its own colon-delimited path first, so
    ``"a:b:a"`` contributes ``a`` then ``b``.

    Args:
        path: List to extend in place.
        directories: Raw positional arguments.

    Returns:
        PathList: The same ``path`` instance, for chaining.
    """
    for argument in directories:
        path.extend_last(parse_unique(argument))
    return path


def print_path(current: PathList) -> PathList:
    """Return the current path unchanged."""

    return PathList(current)


def build_new(directories: Iterable[str]) -> PathList:
    """Build a path solely from arguments, ignoring the current path."""

    return merge_arguments(PathList(), directories)


def add_front(current: PathList, directories: Iterable[str]) -> PathList:
    """Place argument directories first, then surviving current entries.

    Current entries never displace an argument directory.
    """
    path = merge_arguments(PathList(), directories)
    path.extend_unique(current)
    return path


def append_back(current: PathList, directories: Iterable[str]) -> PathList:
    """Keep current entries first and move argument directories to the back."""

    path = PathList(current)
    return merge_arguments(path, directories)


__all__ = ["add_front", "append_back", "build_new", "merge_arguments", "print_path"]
