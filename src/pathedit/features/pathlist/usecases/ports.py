"""Ports for path list use cases.

Where: features/pathlist/usecases.
What: Protocol describing the filesystem queries path cleanup and analysis need.
Why: Allow adapters to satisfy directory inspection without coupling use cases to ``os``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectoryProbe(Protocol):
    """Read-only access to directory metadata."""

    def is_valid_directory(self, path: str) -> bool:
        """Return whether ``path`` names an existing directory, following symlinks.

        Raises:
            MetadataError: If the path exists but its metadata cannot be read.
        """
        ...

    def canonicalize(self, path: str) -> str | None:
        """Return the canonical absolute form of a directory, or ``None`` when invalid.

        Raises:
            PathProbeError: If validation or resolution fails.
        """
        ...

    def list_file_names(self, path: str) -> list[str]:
        """Return the sorted names of regular files directly inside ``path``.

        Raises:
            MetadataError: If the directory cannot be listed.
        """
        ...


__all__ = ["DirectoryProbe"]
