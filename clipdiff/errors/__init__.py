from .extract import ExtractError
from .patch import HunkApplicationFailed, MalformedHunkHeader, PatchFailedError

__all__ = ["PatchFailedError", "MalformedHunkHeader", "HunkApplicationFailed", "ExtractError"]
