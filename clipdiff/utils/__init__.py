# clipdiff/utils/__init__.py
from .paths import declared_path_matches
from .text import detect_eol, normalize_eol, restore_eol, strip_code_fence

__all__ = [
    "declared_path_matches",
    "detect_eol",
    "normalize_eol",
    "restore_eol",
    "strip_code_fence",
]
