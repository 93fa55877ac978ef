"""
Summary: Exceptions raised when directory metadata cannot be inspected.
Why: Separate genuine filesystem failures from the ordinary "path not found" result.
"""

from __future__ import annotations


class PathProbeError(Exception):
    """Base error for failures while inspecting a path entry."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path: str = path


class MetadataError(PathProbeError):
    """Raised when an existing path's metadata or listing cannot be read."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = "Unable to read metadata"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


class CanonicalizationError(PathProbeError):
    """Raised when an existing directory cannot be resolved to canonical form."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = "Unable to canonicalize directory"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(path, message)


__all__ = ["CanonicalizationError", "MetadataError", "PathProbeError"]
