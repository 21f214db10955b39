# clipdiff/core.py
import logging
from dataclasses import dataclass
from typing import Optional

from ._logging import resolve_logger
from .commit import apply_patch
from .errors import ExtractError
from .extract import get_diff_target_path, is_likely_unified_diff
from .models.hunk import PatchResult
from .utils.paths import declared_path_matches
from .utils.text import strip_code_fence


@dataclass
class DiffApplication:
    """Everything a host needs to decide whether and how to commit a patched document."""

    result: PatchResult
    diff: str                            # diff text after fence stripping
    declared_path: Optional[str] = None  # '+++' target, advisory
    path_matches: bool = True

    @property
    def text(self) -> str:
        return self.result.text

    @property
    def changed(self) -> bool:
        return self.result.changed


def apply_diff_text(
    document_text: str,
    raw_diff: str,
    *,
    eol: Optional[str] = None,
    document_path: Optional[str] = None,
    min_score: int = 0,
    logger=None,
    log: bool = False,
) -> DiffApplication:
    """
    Run a pasted diff against a document without touching anything outside memory.

    Steps: unwrap a markdown fence, reject text that is not a unified diff, read the
    declared target path and compare it with `document_path`, then apply the patch.
    A path mismatch is only reported; deciding whether to go ahead is up to the caller,
    who can inspect `path_matches` before using `text`.

    Raises:
        ExtractError: `raw_diff` does not look like a unified diff.
        PatchFailedError: a hunk header is malformed or a hunk does not apply.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    diff = strip_code_fence(raw_diff)
    if not is_likely_unified_diff(diff):
        raise ExtractError("The text does not contain a valid unified diff.")

    declared = get_diff_target_path(diff)
    matches = True
    if declared and document_path is not None:
        matches = declared_path_matches(document_path, declared)
        if not matches:
            log.warning(f"Diff targets '{declared}' but the document is '{document_path}'")

    result = apply_patch(document_text, diff, eol, min_score=min_score, logger=log)
    if not result.changed:
        log.info("No changes applied (already up to date).")
    return DiffApplication(result=result, diff=diff, declared_path=declared, path_matches=matches)
