import re

LF = "\n"
CRLF = "\r\n"

# First fenced block anywhere in the text: ```[lang]\n(body)\n```
_FENCE_RE = re.compile(
    r"^[ \t]*```[a-zA-Z0-9-]*[ \t]*\n(.*?)\n[ \t]*```[ \t]*$",
    flags=re.DOTALL | re.MULTILINE,
)


def normalize_eol(text: str) -> str:
    """Collapse CRLF to LF. Lone CR characters are left alone."""
    if not text:
        return ""
    return text.replace(CRLF, LF)


def restore_eol(text: str, eol: str = LF) -> str:
    """Turn LF-normalized text back into the `eol` convention ("\\n" or "\\r\\n")."""
    if eol == CRLF:
        return text.replace(LF, CRLF)
    if eol != LF:
        raise ValueError(f"unsupported line ending: {eol!r}")
    return text


def detect_eol(text: str) -> str:
    return CRLF if CRLF in text else LF


def strip_code_fence(content: str) -> str:
    """
    Unwrap the first markdown code fence (```diff ... ``` or ``` ... ```) if there
    is one, normalize line endings, and drop leading/trailing blank lines.

    A final line holding exactly one space is kept: it is a blank context line.
    """
    if not content:
        return ""
    content = normalize_eol(content)
    fence_match = _FENCE_RE.search(content)
    if fence_match:
        content = fence_match.group(1)
    lines = content.split(LF)
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip() and lines[-1] != " ":
        lines.pop()
    return LF.join(lines)
