# clipdiff/commit/patch.py
from __future__ import annotations

import logging
import re
from typing import Sequence

from .._logging import resolve_logger
from ..errors.patch import HunkApplicationFailed, MalformedHunkHeader
from ..models.hunk import Hunk, HunkApplication, PatchResult, PatchStatus
from ..utils.text import CRLF, LF, detect_eol, normalize_eol, restore_eol

__all__ = [
    "parse_hunks",
    "split_hunk_blocks",
    "find_best_window",
    "verify_removals",
    "apply_hunk",
    "apply_patch",
    "patch_text",
]

CONTEXT = " "
DELETION = "-"
ADDITION = "+"

_HUNK_SPLIT_RE = re.compile(r"^@@", re.MULTILINE)
_HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


# ---------- parsing ----------

def _opt_int(group: str | None) -> int | None:
    return int(group) if group else None


def parse_hunks(diff_text: str) -> list[Hunk]:
    """
    Split LF-normalized diff text into hunks.

    Anything before the first line-leading '@@' (file headers, prose) is discarded.
    Bodies are kept verbatim, including a trailing empty line when the diff ends
    with a newline. A header that does not parse fails the whole call.

    Raises:
        MalformedHunkHeader: for the first '@@' line that is not a valid header.
    """
    hunks: list[Hunk] = []
    for raw in _HUNK_SPLIT_RE.split(diff_text)[1:]:
        lines = ("@@" + raw).split(LF)
        header = lines[0]
        m = _HUNK_HEADER_RE.match(header)
        if not m:
            raise MalformedHunkHeader(header)
        hunks.append(
            Hunk(
                header=header,
                body=tuple(lines[1:]),
                old_start=int(m.group(1)),
                old_count=_opt_int(m.group(2)),
                new_start=int(m.group(3)),
                new_count=_opt_int(m.group(4)),
            )
        )
    return hunks


def split_hunk_blocks(body: Sequence[str]) -> tuple[list[str], list[str]]:
    """Build the old block (context + deletions) and new block (context + additions)."""
    old_block: list[str] = []
    new_block: list[str] = []
    for ln in body:
        if not ln:
            # blank artifacts between hunks carry no tag
            continue
        tag, value = ln[0], ln[1:]
        if tag in (CONTEXT, DELETION):
            old_block.append(value)
        if tag in (CONTEXT, ADDITION):
            new_block.append(value)
    return old_block, new_block


# ---------- matching ----------

def _score_window(lines: Sequence[str], start: int, target: Sequence[str]) -> int:
    """Count positions where the window at `start` equals `target`, over their overlap."""
    n = min(len(lines) - start, len(target))
    return sum(1 for j in range(n) if lines[start + j] == target[j])


def find_best_window(
    lines: Sequence[str],
    old_block: Sequence[str],
    search_start: int = 0,
    *,
    min_score: int = 0,
) -> tuple[int, int] | None:
    """
    Return (index, score) of the best scoring window at or after `search_start`.

    Candidates run from `search_start` through len(lines) inclusive. Ties keep the
    earliest index and the scan stops at the first perfect score. Any score is
    acceptable unless it falls below `min_score`. None when there is no candidate.
    """
    best_idx, best_score = -1, -1
    for i in range(max(0, search_start), len(lines) + 1):
        score = _score_window(lines, i, old_block)
        if score > best_score:
            best_idx, best_score = i, score
            if score == len(old_block):
                break
    if best_idx < 0 or best_score < min_score:
        return None
    return best_idx, best_score


def verify_removals(lines: Sequence[str], start: int, body: Sequence[str]) -> bool:
    """
    Check that every context and deletion line of `body` is present verbatim in
    `lines`, consecutively from `start`. Additions are not checked.
    """
    idx = start
    for ln in body:
        if not ln:
            continue
        tag, value = ln[0], ln[1:]
        if tag in (CONTEXT, DELETION):
            if idx >= len(lines) or lines[idx] != value:
                return False
            idx += 1
    return True


# ---------- application ----------

def apply_hunk(
    lines: Sequence[str],
    hunk: Hunk,
    search_start: int = 0,
    *,
    min_score: int = 0,
    logger=None,
    log: bool = False,
) -> HunkApplication | None:
    """
    Locate `hunk` in `lines` from `search_start` on, verify it, and splice it in.

    `lines` is not modified; the new document comes back in the result. Returns
    None when no window is found or the verifier rejects the best one.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    old_block, new_block = split_hunk_blocks(hunk.body)
    found = find_best_window(lines, old_block, search_start, min_score=min_score)
    if found is None:
        log.debug(f"{hunk.header}: no candidate window from line {search_start}")
        return None

    idx, score = found
    log.debug(f"{hunk.header}: best window at line {idx}, score {score}/{len(old_block)}")
    if not verify_removals(lines, idx, hunk.body):
        log.debug(f"{hunk.header}: verification failed at line {idx}")
        return None

    merged = tuple(lines[:idx]) + tuple(new_block) + tuple(lines[idx + len(old_block):])
    return HunkApplication(
        lines=merged,
        next_cursor=idx + len(new_block),
        matched_at=idx,
        score=score,
    )


def apply_patch(
    content: str,
    diff_text: str,
    eol: str | None = None,
    *,
    min_score: int = 0,
    logger=None,
    log: bool = False,
) -> PatchResult:
    """
    Apply every hunk of `diff_text` to `content`, top to bottom.

    Each hunk is searched for from the line right after the previous hunk's
    insertion. The result is rendered with `eol` ("\\n" or "\\r\\n"); when None,
    the document's own convention is kept. A result identical to `content` is
    reported as PatchStatus.NO_CHANGES.

    Raises:
        MalformedHunkHeader: a hunk header does not parse; nothing is applied.
        HunkApplicationFailed: a hunk could not be located and verified; all
            changes are discarded.
        ValueError: `eol` is not a supported line ending.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    target_eol = detect_eol(content) if eol is None else eol
    if target_eol not in (LF, CRLF):
        raise ValueError(f"unsupported line ending: {target_eol!r}")

    doc = normalize_eol(content)
    hunks = parse_hunks(normalize_eol(diff_text))
    log.debug(f"Parsed {len(hunks)} hunks")

    lines: Sequence[str] = tuple(doc.split(LF))
    cursor = 0
    for i, hunk in enumerate(hunks):
        applied = apply_hunk(lines, hunk, cursor, min_score=min_score, logger=log)
        if applied is None:
            log.debug(f"Hunk #{i + 1}/{len(hunks)} failed, discarding changes")
            raise HunkApplicationFailed(hunk.header, index=i)
        lines, cursor = applied.lines, applied.next_cursor
        log.debug(f"Hunk #{i + 1}/{len(hunks)} applied at line {applied.matched_at}, cursor -> {cursor}")

    new_text = restore_eol(LF.join(lines), target_eol)
    status = PatchStatus.NO_CHANGES if new_text == content else PatchStatus.CHANGED
    return PatchResult(text=new_text, status=status, applied=len(hunks))


def patch_text(
    content: str,
    diff_text: str,
    eol: str | None = None,
    *,
    min_score: int = 0,
    logger=None,
    log: bool = False,
) -> str:
    """Like apply_patch, returning only the patched text."""
    return apply_patch(content, diff_text, eol, min_score=min_score, logger=logger, log=log).text
