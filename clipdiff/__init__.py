from .commit import apply_hunk, apply_patch, parse_hunks, patch_text
from .core import DiffApplication, apply_diff_text
from .errors import (
    ExtractError,
    HunkApplicationFailed,
    MalformedHunkHeader,
    PatchFailedError,
)
from .extract import get_diff_target_path, is_likely_unified_diff
from .models.hunk import Hunk, PatchResult, PatchStatus
from .utils.paths import declared_path_matches
from .utils.text import normalize_eol, restore_eol, strip_code_fence

__all__ = [
    "apply_diff_text",
    "DiffApplication",
    "apply_patch",
    "apply_hunk",
    "parse_hunks",
    "patch_text",
    "Hunk",
    "PatchResult",
    "PatchStatus",
    "is_likely_unified_diff",
    "get_diff_target_path",
    "declared_path_matches",
    "normalize_eol",
    "restore_eol",
    "strip_code_fence",
    "PatchFailedError",
    "MalformedHunkHeader",
    "HunkApplicationFailed",
    "ExtractError",
]
