from .diffs import get_diff_target_path, is_likely_unified_diff, strip_header_path

__all__ = [
    "is_likely_unified_diff",
    "get_diff_target_path",
    "strip_header_path",
]
