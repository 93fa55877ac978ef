"""Application services."""

from .path_service import PathEditRequest, PathEditResult, PathEditService

__all__ = ["PathEditRequest", "PathEditResult", "PathEditService"]
