"""Exception hierarchy raised while reading Bazaar branches."""

from __future__ import annotations

from typing import Optional, Sequence


class BzrError(Exception):
    """Base class for every error raised by bzrmeta."""


class PathError(BzrError):
    """Raised when a branch path does not exist or cannot be read."""


class NotABranchError(BzrError):
    """Raised when a readable path is not a Bazaar branch."""


class MissingFieldError(BzrError):
    """Raised when ``bzr version-info`` output lacks a required key."""

    def __init__(self, key: str):
        super().__init__(f"no such info-key: {key}")
        self.key = key


class MalformedTimestampError(BzrError):
    """Raised when a date string cannot be parsed."""

    def __init__(self, text: str):
        super().__init__(f"unparsable timestamp: {text!r}")
        self.text = text


class MalformedBlockError(BzrError):
    """Raised for a log block without any recognised field."""


class SubprocessError(BzrError):
    """Raised when a ``bzr`` command cannot run or exits with an error."""

    def __init__(
        self,
        args: Sequence[str],
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(f"{' '.join(args)}: {message}")
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
