"""Stand-in for the ``bzr`` executable used by the subprocess tests.

A directory counts as a branch when it contains a ``.bzr`` folder.
"""

from __future__ import annotations

import sys
from pathlib import Path

SEPARATOR = "-" * 60

VERSION_INFO = """revision-id: rp@dwarf-20070822092203-xzink973ch9e5d07
date: 2007-08-22 11:22:03 +0200
build-date: 2007-08-22 11:30:00 +0200
revno: 3
branch-nick: rubzr
"""

ENTRIES = [
    ("1", "Tue 2007-08-21 16:57:22 +0200", "added Info"),
    ("2", "Tue 2007-08-21 21:05:42 +0200", "log-parsing..."),
    ("3", "Wed 2007-08-22 11:22:03 +0200", "commit times"),
]


def _log(args: list[str]) -> str:
    entries = ENTRIES if "--forward" in args else list(reversed(ENTRIES))
    blocks = []
    for revno, timestamp, message in entries:
        blocks.append(
            f"{SEPARATOR}\n"
            f"revno: {revno}\n"
            "committer: rene paulokat <rene@so36.net>\n"
            "branch nick: rubzr\n"
            f"timestamp: {timestamp}\n"
            "message:\n"
            f"  {message}\n"
        )
    return "".join(blocks)


def main(args: list[str]) -> int:
    if not (Path.cwd() / ".bzr").is_dir():
        sys.stderr.write(f"bzr: ERROR: Not a branch: \"{Path.cwd()}/\".\n")
        return 3
    if args[:1] == ["version-info"]:
        sys.stdout.write(VERSION_INFO)
        return 0
    if args[:1] == ["log"]:
        sys.stdout.write(_log(args))
        return 0
    sys.stderr.write(f"bzr: ERROR: unknown command \"{args[0]}\"\n")
    return 3


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
