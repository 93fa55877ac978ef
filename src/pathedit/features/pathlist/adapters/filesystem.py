"""
Summary: Local filesystem adapter for directory validation, canonicalization and listing.
Why: Confine ``os`` calls and their error translation to a single module.
"""

from __future__ import annotations

import errno
import os
import stat
import sys
from typing import Final, final

from pathedit.features.pathlist.domain.errors import CanonicalizationError, MetadataError
from pathedit.platform.logging import logger

# Errors meaning "there is no directory here" rather than "cannot tell".
_MISSING_ERRNOS: Final[frozenset[int]] = frozenset(
    {errno.ENOENT, errno.ENOTDIR, errno.ELOOP, errno.ENAMETOOLONG}
)


def is_valid_directory(path: str) -> bool:
    """Return whether ``path`` denotes an existing directory.

    Symlinks are followed, so a link to a directory is valid while a broken
    or looping link is simply invalid.

    Args:
        path: Candidate directory.

    Returns:
        bool: ``True`` for directories, ``False`` for anything missing or not a directory.

    Raises:
        MetadataError: If the path exists but its metadata cannot be read.
    """
    if not path:
        return False

    try:
        status = os.stat(path)
    except OSError as exc:
        if exc.errno in _MISSING_ERRNOS:
            return False
        raise MetadataError(path, exc.strerror) from exc
    except ValueError:
        # Embedded NUL bytes cannot name a filesystem object.
        return False

    return stat.S_ISDIR(status.st_mode)


def canonicalize(path: str) -> str | None:
    """Resolve ``path`` to its canonical absolute form when it is a directory.

    Args:
        path: Candidate directory.

    Returns:
        str | None: Canonical path, the original ``path`` when the canonical
        form has no representable string, or ``None`` when ``path`` is not a
        valid directory.

    Raises:
        MetadataError: If validation fails for an existing path.
        CanonicalizationError: If resolution fails, e.g. on a symlink cycle.
    """
    if not is_valid_directory(path):
        return None

    try:
        canonical = os.path.realpath(path, strict=True)
    except OSError as exc:
        raise CanonicalizationError(path, exc.strerror or str(exc)) from exc

    try:
        _ = canonical.encode(sys.getfilesystemencoding())
    except UnicodeEncodeError:
        logger.debug("Canonical form of %r is not representable; keeping original", path)
        return path

    return canonical


def list_file_names(path: str) -> list[str]:
    """List regular files (symlinks followed) directly inside ``path``.

    Args:
        path: Directory to scan.

    Returns:
        list[str]: File names sorted lexicographically.

    Raises:
        MetadataError: If the directory cannot be opened or read.
    """
    names: list[str] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if entry.is_file():
                        names.append(entry.name)
                except OSError as exc:
                    logger.debug("Skipping unreadable entry %s: %s", entry.path, exc)
    except OSError as exc:
        raise MetadataError(path, exc.strerror) from exc

    names.sort()
    return names


@final
class LocalDirectoryProbe:
    """``DirectoryProbe`` backed by the local filesystem."""

    def is_valid_directory(self, path: str) -> bool:
        return is_valid_directory(path)

    def canonicalize(self, path: str) -> str | None:
        return canonicalize(path)

    def list_file_names(self, path: str) -> list[str]:
        return list_file_names(path)


__all__ = ["LocalDirectoryProbe", "canonicalize", "is_valid_directory", "list_file_names"]
