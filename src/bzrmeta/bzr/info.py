"""Branch status as reported by ``bzr version-info``."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable

from ..errors import MissingFieldError
from ..timestamps import parse_timestamp

REQUIRED_KEYS = ("date", "revno", "branch-nick", "revision-id")


@dataclass(frozen=True, slots=True)
class BranchInfo:
    """Latest revision, nickname and date of a branch."""

    date: datetime
    revno: str
    branch_nick: str
    revision_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "date": self.date.isoformat(),
            "revno": self.revno,
            "branch_nick": self.branch_nick,
            "revision_id": self.revision_id,
        }

    def __str__(self) -> str:
        return (
            f"revision: {self.revno} | date: {self.date} | "
            f"branch-nick: {self.branch_nick} | revision-id: {self.revision_id}"
        )


def parse_key_values(lines: Iterable[str]) -> Dict[str, str]:
    """Split ``key: value`` lines on the first colon.

    Lines without a colon are ignored. Values keep any further colons and are
    trimmed; a repeated key keeps its last value.
    """

    values: Dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        values[key.strip()] = value.strip()
    return values


def build_info(lines: Iterable[str]) -> BranchInfo:
    """Create a :class:`BranchInfo` from raw ``bzr version-info`` output.

    Raises
    ------
    MissingFieldError:
        If one of ``date``, ``revno``, ``branch-nick`` or ``revision-id`` is absent
    MalformedTimestampError:
        If ``date`` cannot be parsed
    """
    values = parse_key_values(lines)
    for key in REQUIRED_KEYS:
        if key not in values:
            raise MissingFieldError(key)

    return BranchInfo(
        date=parse_timestamp(values["date"]),
        revno=values["revno"],
        branch_nick=values["branch-nick"],
        revision_id=values["revision-id"],
    )
