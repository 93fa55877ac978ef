"""Filesystem adapters for the path list feature."""

from .filesystem import LocalDirectoryProbe, canonicalize, is_valid_directory, list_file_names

__all__ = ["LocalDirectoryProbe", "canonicalize", "is_valid_directory", "list_file_names"]
