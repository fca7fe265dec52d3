"""bzrmeta package.

Extracts branch info and commit history from Bazaar branches by parsing the
output of the ``bzr`` command line tool.
"""

__all__ = [
    "bzr",
    "cli",
    "config",
    "errors",
    "log",
    "timestamps",
]
