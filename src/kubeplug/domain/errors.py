"""Error kinds raised by path canonicalisation and identity resolution.

Both propagate to the caller untouched; the service layer turns them into
a failed ServiceResult and the CLI decides the exit code.
"""

from __future__ import annotations


class InputError(ValueError):
    """A path argument is empty or otherwise malformed."""


class ResolutionError(OSError):
    """A path could not be canonicalised.

    Raised on permission errors, link chains that exceed the indirection
    budget, and existing non-directory segments used as directories.

    Attributes:
        path: The path (or prefix) being resolved when the failure happened.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = self.args[0] if self.args else ""
        if self.path is None:
            return msg
        return f"{msg}: {self.path!r}"
