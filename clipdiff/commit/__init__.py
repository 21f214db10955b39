from .patch import apply_hunk, apply_patch, parse_hunks, patch_text

__all__ = ["parse_hunks", "apply_hunk", "apply_patch", "patch_text"]
