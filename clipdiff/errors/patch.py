from __future__ import annotations


class PatchFailedError(Exception):
    """Base class for every failure to apply a unified diff."""


class MalformedHunkHeader(PatchFailedError):
    """An '@@' block whose header line does not follow '@@ -a[,b] +c[,d] @@'."""

    def __init__(self, header: str):
        super().__init__(f"Invalid hunk header: {header}")
        self.header = header


class HunkApplicationFailed(PatchFailedError):
    """A hunk could not be located and verified from the search cursor onward."""

    def __init__(self, header: str, index: int | None = None):
        super().__init__(f"Could not apply hunk:\n{header}")
        self.header = header
        self.index = index
