"""
Summary: Ordered, duplicate-free list of directories parsed from PATH-like strings.
Why: Keep the first-wins and last-wins insertion policies explicit and separate.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Final, final

PATH_SEPARATOR: Final[str] = ":"


@final
class PathList:
    """Ordered sequence of directory strings with no two entries equal.

    Entries are only ever added through ``insert_unique`` or ``insert_last``
    so the uniqueness invariant holds after every mutation.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[str] = ()) -> None:
        """Initialize the list, keeping the first occurrence of each entry.

        Args:
            entries: Directories to add with insert-unique semantics.
        """
        self._entries: list[str] = []
        self.extend_unique(entries)

    @classmethod
    def parse(cls, source: str) -> PathList:
        """Parse a colon-delimited string, dropping empties and later duplicates."""

        return cls(parse_raw(source))

    def insert_unique(self, directory: str) -> None:
        """Append ``directory`` unless it is empty or already present."""

        if directory and directory not in self._entries:
            self._entries.append(directory)

    def insert_last(self, directory: str) -> None:
        """Move ``directory`` to the end, appending it if absent."""

        if not directory:
            return
        self.remove(directory)
        self._entries.append(directory)

    def extend_unique(self, directories: Iterable[str]) -> None:
        for directory in directories:
            self.insert_unique(directory)

    def extend_last(self, directories: Iterable[str]) -> None:
        for directory in directories:
            self.insert_last(directory)

    def remove(self, directory: str) -> None:
        """Remove every occurrence of ``directory``; absent values are ignored."""

        self._entries = [entry for entry in self._entries if entry != directory]

    def format(self) -> str:
        """Join entries with the path separator."""

        return format_path(self._entries)

    def to_tuple(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, directory: object) -> bool:
        return directory in self._entries

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathList):
            return self._entries == other._entries
        if isinstance(other, list):
            return self._entries == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"PathList({self._entries!r})"


def parse_unique(source: str) -> PathList:
    """Split ``source`` on colons into a ``PathList`` keeping first occurrences."""

    return PathList.parse(source)


def parse_raw(source: str) -> list[str]:
    """Split ``source`` on colons, dropping empty segments but keeping duplicates."""

    return [segment for segment in source.split(PATH_SEPARATOR) if segment]


def format_path(directories: Iterable[str]) -> str:
    """Join directories into a single colon-delimited string."""

    return PATH_SEPARATOR.join(directories)


__all__ = ["PATH_SEPARATOR", "PathList", "format_path", "parse_raw", "parse_unique"]
