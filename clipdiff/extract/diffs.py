# clipdiff/extract/diffs.py
from __future__ import annotations

import re

from ..utils.text import normalize_eol

_HUNK_START_RE = re.compile(r"^@@\s-", flags=re.MULTILINE)
_FILE_HEADER_PAIR_RE = re.compile(r"^---\s.+\n\+\+\+\s.+", flags=re.MULTILINE)
_TARGET_HEADER_RE = re.compile(r"^---\s+(.+)\n\+\+\+\s+(.+)$", flags=re.MULTILINE)
_QUOTES_RE = re.compile(r"^[\"']|[\"']$")
_AB_PREFIX_RE = re.compile(r"^[ab]/")
_ANNOTATION_SPLIT_RE = re.compile(r"\s{2,}")


# =============================
# Diff heuristics
# =============================

def is_likely_unified_diff(text: str) -> bool:
    """
    Cheap pre-check: a '@@ -' hunk header at a line start, or a '---'/'+++' header
    pair on consecutive lines. Parsing can still fail afterwards.
    """
    if not text:
        return False
    text = normalize_eol(text)
    return bool(_HUNK_START_RE.search(text) or _FILE_HEADER_PAIR_RE.search(text))


# =============================
# Declared target path
# =============================

def strip_header_path(path: str) -> str:
    """
    Clean a '---'/'+++' header path: surrounding quotes, the a/ or b/ prefix, and any
    trailing tab-separated timestamp or double-space separated annotation.
    """
    p = _QUOTES_RE.sub("", path)
    p = _AB_PREFIX_RE.sub("", p)
    p = p.split("\t")[0]
    return _ANNOTATION_SPLIT_RE.split(p)[0]


def get_diff_target_path(text: str) -> str | None:
    """
    Return the advisory target path declared by the first '---'/'+++' pair (the
    '+++' side), or None when the diff carries no file headers.
    """
    if not text:
        return None
    m = _TARGET_HEADER_RE.search(normalize_eol(text))
    if not m:
        return None
    return strip_header_path(m.group(2).strip())
