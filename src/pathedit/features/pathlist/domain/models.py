"""
Summary: Value objects describing path operations and analysis findings.
Why: Give the service layer and displays one shared vocabulary for results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PathOperation(str, Enum):
    """Closed set of operations the tool can perform on a path string."""

    PRINT = "print"
    NEW = "new"
    ADD = "add"
    APPEND = "append"
    ANALYZE = "analyze"

    @staticmethod
    def from_user_input(value: str) -> "PathOperation":
        """Translate a raw command name into the matching operation."""

        normalized = value.strip().lower()
        for operation in PathOperation:
            if operation.value == normalized:
                return operation
        valid = ", ".join(op.value for op in PathOperation)
        msg = f"Unsupported operation '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class Shadow:
    """A file in an earlier directory hidden by a same-named file later on."""

    covered_directory: str
    filename: str


@dataclass(slots=True, frozen=True)
class ShadowedDirectory:
    """All shadows introduced by one directory, in discovery order."""

    directory: str
    shadows: tuple[Shadow, ...]


@dataclass(slots=True, frozen=True)
class AnalysisReport:
    """Diagnostic findings computed over the raw, non-deduplicated path."""

    invalid_directories: tuple[str, ...] = ()
    duplicate_directories: tuple[str, ...] = ()
    shadowed_entries: tuple[ShadowedDirectory, ...] | None = field(default=None)

    @property
    def includes_shadows(self) -> bool:
        return self.shadowed_entries is not None


__all__ = ["AnalysisReport", "PathOperation", "Shadow", "ShadowedDirectory"]
