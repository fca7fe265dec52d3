"""Parsing of ``bzr log`` output."""

from .model import Commit, Log
from .parser import SEPARATOR, extract_commit, parse_log, segment_blocks

__all__ = [
    "Commit",
    "Log",
    "SEPARATOR",
    "extract_commit",
    "parse_log",
    "segment_blocks",
]
