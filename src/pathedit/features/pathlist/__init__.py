# Path: `src/pathedit/features/pathlist/__init__.py`
# Summary: Export path list domain, adapter and use case symbols.
# Why: Provide a stable import surface for the service layer and tests.

from .adapters.filesystem import LocalDirectoryProbe, canonicalize, is_valid_directory, list_file_names
from .domain.errors import CanonicalizationError, MetadataError, PathProbeError
from .domain.models import AnalysisReport, PathOperation, Shadow, ShadowedDirectory
from .domain.path_list import PATH_SEPARATOR, PathList, format_path, parse_raw, parse_unique
from .usecases.analyzer import analyze, find_duplicates, find_invalid, find_shadowed
from .usecases.cleanup import apply_post_processing, filter_valid, normalize
from .usecases.editor import add_front, append_back, build_new, merge_arguments, print_path
from .usecases.ports import DirectoryProbe

__all__ = [
    "PATH_SEPARATOR",
    "AnalysisReport",
    "CanonicalizationError",
    "DirectoryProbe",
    "LocalDirectoryProbe",
    "MetadataError",
    "PathList",
    "PathOperation",
    "PathProbeError",
    "Shadow",
    "ShadowedDirectory",
    "add_front",
    "analyze",
    "append_back",
    "apply_post_processing",
    "build_new",
    "canonicalize",
    "filter_valid",
    "find_duplicates",
    "find_invalid",
    "find_shadowed",
    "format_path",
    "is_valid_directory",
    "list_file_names",
    "merge_arguments",
    "normalize",
    "parse_raw",
    "parse_unique",
    "print_path",
]
