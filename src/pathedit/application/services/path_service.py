"""Application service that runs one path operation end to end."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import final

from pathedit.features.pathlist import (
    AnalysisReport,
    DirectoryProbe,
    LocalDirectoryProbe,
    PathList,
    PathOperation,
    add_front,
    analyze,
    append_back,
    apply_post_processing,
    build_new,
    parse_unique,
    print_path,
)
from pathedit.platform.logging import logger


@dataclass(slots=True)
class PathEditRequest:
    """Parameters describing a single invocation."""

    operation: PathOperation
    source: str = ""
    directories: Sequence[str] = field(default_factory=tuple)
    filter: bool = False
    normalize: bool = False
    pretty: bool = False
    shadows: bool = False


@dataclass(slots=True, frozen=True)
class PathEditResult:
    """Outcome of a path operation ready for display."""

    directories: tuple[str, ...] = ()
    one_per_line: bool = False
    report: AnalysisReport | None = None


@final
class PathEditService:
    """Application façade dispatching requests to the path list use cases."""

    _probe: DirectoryProbe

    def __init__(self, *, probe: DirectoryProbe | None = None) -> None:
        self._probe = probe or LocalDirectoryProbe()

    def run(self, request: PathEditRequest) -> PathEditResult:
        """Execute the requested operation.

        Args:
            request: Operation, source path value and flags.

        Returns:
            PathEditResult: Directories to print, or an analysis report.

        Raises:
            PathProbeError: If shadow analysis cannot read a directory.
        """
        if request.operation is PathOperation.ANALYZE:
            report = analyze(
                request.source,
                include_shadows=request.shadows,
                probe=self._probe,
            )
            return PathEditResult(report=report)

        current = parse_unique(request.source)
        path = self._edit(request.operation, current, request.directories)
        logger.debug("%s produced %d entries", request.operation.value, len(path))

        path = apply_post_processing(
            path,
            filter_requested=request.filter,
            normalize_requested=request.normalize,
            probe=self._probe,
        )
        one_per_line = request.pretty or request.operation is PathOperation.PRINT
        return PathEditResult(directories=path.to_tuple(), one_per_line=one_per_line)

    @staticmethod
    def _edit(
        operation: PathOperation,
        current: PathList,
        directories: Sequence[str],
    ) -> PathList:
        match operation:
            case PathOperation.PRINT:
                return print_path(current)
            case PathOperation.NEW:
                return build_new(directories)
            case PathOperation.ADD:
                return add_front(current, directories)
            case PathOperation.APPEND:
                return append_back(current, directories)
            case PathOperation.ANALYZE:
                raise ValueError("Analyze does not produce an edited path")


__all__ = ["PathEditRequest", "PathEditResult", "PathEditService"]
