"""Commit records and the ordered log that holds them."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple

from ..timestamps import parse_timestamp

IDENTITY_FIELDS = ("revno", "committer", "branch_nick", "timestamp")


@dataclass(frozen=True, slots=True)
class Commit:
    """A single entry of ``bzr log``.

    ``timestamp`` is kept exactly as printed by bzr; use :attr:`time` for a
    parsed value. ``message`` holds the first line of the commit message.
    """

    revno: Optional[str] = None
    committer: Optional[str] = None
    branch_nick: Optional[str] = None
    timestamp: Optional[str] = None
    message: Optional[str] = None
    merged: Optional[str] = None

    @property
    def time(self) -> datetime:
        return parse_timestamp(self.timestamp or "")

    def missing_fields(self) -> Tuple[str, ...]:
        """Return the identity fields this commit lacks."""
        return tuple(name for name in IDENTITY_FIELDS if getattr(self, name) is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True, slots=True)
class Log:
    """Commits in the order the log command emitted them."""

    commits: Tuple[Commit, ...] = ()
    skipped: int = 0

    @property
    def count(self) -> int:
        return len(self.commits)

    def each_entry(self) -> Iterator[Commit]:
        """Return a new iterator over the commits on every call."""
        return iter(self.commits)

    def last(self, num: int) -> List[Commit]:
        """Return the final ``num`` commits in stored order.

        ``num`` larger than :attr:`count` returns every commit; ``0`` returns
        an empty list.
        """
        if num < 0:
            raise ValueError(f"num must not be negative, got {num}")
        if num == 0:
            return []
        return list(self.commits[-num:])

    def __iter__(self) -> Iterator[Commit]:
        return self.each_entry()

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> Commit:
        return self.commits[index]
