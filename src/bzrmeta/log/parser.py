"""Parsing of ``bzr log`` output into :class:`Commit` records.

``bzr log`` prints every revision as a block introduced by a line of 60
dashes::

    ------------------------------------------------------------
    revno: 2
    committer: rene paulokat <rene@so36.net>
    branch nick: rubzr
    timestamp: Tue 2007-08-21 16:58:29 +0200
    message:
      added Info

Parsing happens in two steps. :func:`segment_blocks` cuts the output into
per-revision blocks, :func:`extract_commit` turns one block into a commit.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..errors import MalformedBlockError
from .model import Commit, Log

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 60
MESSAGE_MARKER = "message:"

# label as printed by bzr -> Commit attribute
FIELD_LABELS: Dict[str, str] = {
    "revno": "revno",
    "committer": "committer",
    "branch nick": "branch_nick",
    "branch_nick": "branch_nick",
    "timestamp": "timestamp",
    "merged": "merged",
}


def _is_separator(line: str) -> bool:
    return line.strip() == SEPARATOR


def block_spans(lines: Sequence[str]) -> List[Tuple[int, int]]:
    """Return ``(start, end)`` index pairs, one per separator.

    Each span starts at a separator and ends before the next one; the last
    span ends at the end of ``lines``.
    """
    offsets = [index for index, line in enumerate(lines) if _is_separator(line)]
    ends = offsets[1:] + [len(lines)]
    return list(zip(offsets, ends))


def segment_blocks(lines: Sequence[str]) -> List[List[str]]:
    """Split raw log output into per-commit blocks with separators removed.

    Blocks left empty once separators are removed are dropped, so output
    ending on a separator does not produce an extra block.
    """
    blocks: List[List[str]] = []
    for start, end in block_spans(lines):
        block = [line for line in lines[start:end] if not _is_separator(line)]
        if any(line.strip() for line in block):
            blocks.append(block)
    return blocks


def _match_label(line: str) -> Optional[Tuple[str, str]]:
    label, sep, value = line.lstrip().partition(":")
    if not sep:
        return None
    attribute = FIELD_LABELS.get(label)
    if attribute is None:
        return None
    return attribute, value.strip()


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _skip_message_body(block: Sequence[str], index: int, depth: int) -> int:
    """Return the index of the first line after a message body.

    The body is every blank line or line indented deeper than the marker.
    """
    while index < len(block):
        line = block[index]
        if line.strip() and _indent(line) <= depth:
            break
        index += 1
    return index


def extract_commit(block: Sequence[str]) -> Commit:
    """Build a :class:`Commit` from the lines of one block.

    The ``message:`` label stands on its own line; the message is the line
    that follows it. Further body lines, indented deeper than the label, are
    never read as fields. Missing fields are left as ``None``.

    Raises
    ------
    MalformedBlockError:
        If no line of the block carries a known label
    """
    values: Dict[str, str] = {}
    matched = False
    index = 0
    while index < len(block):
        line = block[index]
        if line.strip().startswith(MESSAGE_MARKER):
            matched = True
            if index + 1 < len(block):
                values["message"] = block[index + 1].strip()
            index = _skip_message_body(block, index + 2, _indent(line))
            continue

        field = _match_label(line)
        if field is not None:
            attribute, value = field
            values[attribute] = value
            matched = True
        index += 1

    if not matched:
        raise MalformedBlockError(f"no commit fields in block: {list(block)!r}")
    return Commit(**values)


def parse_log(lines: Iterable[str]) -> Log:
    """Parse complete ``bzr log`` output into a :class:`Log`.

    A malformed block is skipped and counted in :attr:`Log.skipped` rather than
    failing the whole log.
    """
    commits: List[Commit] = []
    skipped = 0
    for block in segment_blocks(list(lines)):
        try:
            commits.append(extract_commit(block))
        except MalformedBlockError as exc:
            skipped += 1
            logger.warning("Skipping log entry: %s", exc)

    logger.debug("Parsed %d commits (%d skipped)", len(commits), skipped)
    return Log(commits=tuple(commits), skipped=skipped)
