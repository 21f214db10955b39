from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Hunk:
    """One '@@' change region of a unified diff, as declared in the source text."""

    header: str             # raw header line, kept for error reporting
    body: Tuple[str, ...]   # tagged lines (' ', '-', '+'), newline excluded, verbatim
    old_start: int          # 1-based, advisory only
    old_count: Optional[int]
    new_start: int          # 1-based, advisory only
    new_count: Optional[int]


@dataclass(frozen=True)
class HunkApplication:
    """Document state after one hunk was spliced in."""

    lines: Tuple[str, ...]
    next_cursor: int    # line index right after the inserted block
    matched_at: int     # where the old block started
    score: int


class PatchStatus(str, Enum):
    CHANGED = "changed"
    NO_CHANGES = "no_changes"


@dataclass(frozen=True)
class PatchResult:
    """Outcome of a successful patch run."""

    text: str
    status: PatchStatus
    applied: int = 0

    @property
    def changed(self) -> bool:
        return self.status is PatchStatus.CHANGED
