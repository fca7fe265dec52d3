"""Free-form date parsing shared by branch info and commits."""

from __future__ import annotations

from datetime import datetime

from dateutil import parser as dateutil_parser

from .errors import MalformedTimestampError


def parse_timestamp(text: str) -> datetime:
    """Parse ``text`` such as ``Tue 2007-08-21 16:58:29 +0200``.

    Raises :class:`MalformedTimestampError` for blank or unparsable input.
    """

    cleaned = (text or "").strip()
    if not cleaned:
        raise MalformedTimestampError(text)
    try:
        return dateutil_parser.parse(cleaned)
    except (ValueError, OverflowError) as exc:
        raise MalformedTimestampError(text) from exc
