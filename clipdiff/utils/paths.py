# clipdiff/utils/paths.py
import re
from typing import Optional

import pathspec

_GLOB_CHARS_RE = re.compile(r"[*?\[\]!#]")
_AB_PREFIX_RE = re.compile(r"^[ab]/")
_DOT_SLASH_RE = re.compile(r"^(?:\./)+")


def _to_posix(path: str) -> str:
    return path.replace("\\", "/")


def declared_path_matches(document_path: Optional[str], declared_path: Optional[str]) -> bool:
    """
    Return True when `document_path` plausibly is the file a diff declares as its target.

    The declared path (from the '+++' header) is usually repository-relative while the
    document path is absolute, so the check is a suffix match on whole path components:
    'src/app.py' matches '/home/me/proj/src/app.py' but not '/home/me/proj/mysrc/app.py'.
    A missing declared path never produces a mismatch.
    """
    if not declared_path:
        return True
    if not document_path:
        return False

    declared = _DOT_SLASH_RE.sub("", _AB_PREFIX_RE.sub("", _to_posix(declared_path))).lstrip("/")
    doc = _to_posix(document_path).lstrip("/")
    if not declared:
        return True

    # A pattern without a trailing slash also matches paths below a directory of that name.
    if doc.rsplit("/", 1)[-1] != declared.rsplit("/", 1)[-1]:
        return False

    if _GLOB_CHARS_RE.search(declared):
        # Literal names that would read as wildcards; compare the text directly.
        return doc == declared or doc.endswith("/" + declared)

    spec = pathspec.GitIgnoreSpec.from_lines(["**/" + declared])
    return spec.match_file(doc)
