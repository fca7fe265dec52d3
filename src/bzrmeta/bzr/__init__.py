"""Bazaar integration: command execution, branch info and branches."""

from .branch import Branch
from .info import BranchInfo, build_info
from .runner import CommandRunner, SubprocessRunner

__all__ = [
    "Branch",
    "BranchInfo",
    "build_info",
    "CommandRunner",
    "SubprocessRunner",
]
