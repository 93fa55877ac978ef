"""
Summary: Best-effort filter and normalize passes applied after an edit operation.
Why: A cleanup pass drops problem entries instead of aborting on one bad directory.
"""

from __future__ import annotations

from collections.abc import Iterable

from pathedit.features.pathlist.adapters.filesystem import LocalDirectoryProbe
from pathedit.features.pathlist.domain.errors import PathProbeError
from pathedit.features.pathlist.domain.path_list import PathList
from pathedit.features.pathlist.usecases.ports import DirectoryProbe
from pathedit.platform.logging import logger


def filter_valid(directories: Iterable[str], probe: DirectoryProbe | None = None) -> PathList:
    """Keep only entries naming existing directories.

    Args:
        directories: Entries to check, in order.
        probe: Directory inspector; defaults to the local filesystem.

    Returns:
        PathList: Valid entries, first occurrence kept.
    """
    probe = probe or LocalDirectoryProbe()
    result = PathList()
    for directory in directories:
        try:
            valid = probe.is_valid_directory(directory)
        except PathProbeError as exc:
            logger.debug("Dropping %s: %s", directory, exc)
            continue
        if valid:
            result.insert_unique(directory)
        else:
            logger.debug("Dropping %s: not a directory", directory)
    return result


def normalize(directories: Iterable[str], probe: DirectoryProbe | None = None) -> PathList:
    """Replace entries with their canonical form, dropping invalid ones.

    Distinct entries resolving to the same directory collapse onto the first.

    Args:
        directories: Entries to resolve, in order.
        probe: Directory inspector; defaults to the local filesystem.

    Returns:
        PathList: Canonical entries, first occurrence kept.
    """
    probe = probe or LocalDirectoryProbe()
    result = PathList()
    for directory in directories:
        try:
            canonical = probe.canonicalize(directory)
        except PathProbeError as exc:
            logger.debug("Dropping %s: %s", directory, exc)
            continue
        if not canonical:
            logger.debug("Dropping %s: not a directory", directory)
            continue
        result.insert_unique(canonical)
    return result


def apply_post_processing(
    path: PathList,
    *,
    filter_requested: bool,
    normalize_requested: bool,
    probe: DirectoryProbe | None = None,
) -> PathList:
    """Apply filter or normalize; filter wins when both are requested."""

    if filter_requested:
        return filter_valid(path, probe)
    if normalize_requested:
        return normalize(path, probe)
    return path


__all__ = ["apply_post_processing", "filter_valid", "normalize"]
