"""
Summary: Diagnostics over a raw path string: invalid, duplicate and shadowing entries.
Why: Analysis must see every occurrence, so it works on the non-deduplicated parse.
"""

from __future__ import annotations

from collections.abc import Sequence

from pathedit.features.pathlist.adapters.filesystem import LocalDirectoryProbe
from pathedit.features.pathlist.domain.errors import PathProbeError
from pathedit.features.pathlist.domain.models import AnalysisReport, Shadow, ShadowedDirectory
from pathedit.features.pathlist.domain.path_list import parse_raw
from pathedit.features.pathlist.usecases.ports import DirectoryProbe
from pathedit.platform.logging import logger


def find_invalid(raw_directories: Sequence[str], probe: DirectoryProbe | None = None) -> list[str]:
    """Return every entry that is not a valid directory, repeats included.

    Entries whose metadata cannot be read are reported as invalid.
    """
    probe = probe or LocalDirectoryProbe()
    invalid: list[str] = []
    for directory in raw_directories:
        try:
            valid = probe.is_valid_directory(directory)
        except PathProbeError as exc:
            logger.debug("Treating %s as invalid: %s", directory, exc)
            valid = False
        if not valid:
            invalid.append(directory)
    return invalid


def find_duplicates(raw_directories: Sequence[str]) -> list[str]:
    """Return each entry from its second occurrence onward, in order."""

    seen: set[str] = set()
    duplicates: list[str] = []
    for directory in raw_directories:
        if directory in seen:
            duplicates.append(directory)
        else:
            seen.add(directory)
    return duplicates


def find_shadowed(
    raw_directories: Sequence[str],
    probe: DirectoryProbe | None = None,
) -> list[ShadowedDirectory]:
    """Find files hidden by a same-named file in an earlier directory.

    Directories are scanned in search order. The first directory holding a
    given file name owns it; any later directory holding the same name is
    reported as shadowing that owner. Entries whose metadata cannot be read
    are skipped like invalid ones.

    Args:
        raw_directories: Entries in search order, duplicates included.
        probe: Directory inspector; defaults to the local filesystem.

    Returns:
        list[ShadowedDirectory]: Only directories that shadow at least one file.

    Raises:
        PathProbeError: If a valid directory cannot be listed.
    """
    probe = probe or LocalDirectoryProbe()
    owners: dict[str, str] = {}
    report: list[ShadowedDirectory] = []

    for directory in raw_directories:
        try:
            valid = probe.is_valid_directory(directory)
        except PathProbeError as exc:
            logger.debug("Skipping %s in shadow scan: %s", directory, exc)
            continue
        if not valid:
            continue

        file_names = probe.list_file_names(directory)
        shadows = tuple(
            Shadow(covered_directory=owners[name], filename=name)
            for name in file_names
            if name in owners
        )
        if shadows:
            report.append(ShadowedDirectory(directory=directory, shadows=shadows))

        for name in file_names:
            _ = owners.setdefault(name, directory)

    return report


def analyze(
    source: str,
    *,
    include_shadows: bool = False,
    probe: DirectoryProbe | None = None,
) -> AnalysisReport:
    """Build the full analysis report for an unparsed path string.

    Args:
        source: Raw colon-delimited path value.
        include_shadows: Whether to scan directories for shadowed files.
        probe: Directory inspector; defaults to the local filesystem.

    Returns:
        AnalysisReport: Findings over the raw parse of ``source``.
    """
    probe = probe or LocalDirectoryProbe()
    raw_directories = parse_raw(source)
    logger.debug("Analyzing %d path entries", len(raw_directories))

    shadowed = tuple(find_shadowed(raw_directories, probe)) if include_shadows else None
    return AnalysisReport(
        invalid_directories=tuple(find_invalid(raw_directories, probe)),
        duplicate_directories=tuple(find_duplicates(raw_directories)),
        shadowed_entries=shadowed,
    )


__all__ = ["analyze", "find_duplicates", "find_invalid", "find_shadowed"]
