"""Read-only view of a Bazaar branch on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Callable, List, Optional

from ..errors import NotABranchError, PathError, SubprocessError
from ..log.model import Commit, Log
from ..log.parser import parse_log
from .info import BranchInfo, build_info
from .runner import VERSION_INFO_COMMAND, CommandRunner, log_command

if TYPE_CHECKING:
    from ..config import BzrConfig

logger = logging.getLogger(__name__)


def _default_runner(config: Optional["BzrConfig"]) -> CommandRunner:
    from ..config import DEFAULT_CONFIG

    return (config or DEFAULT_CONFIG).make_runner()


class Branch:
    """A Bazaar branch identified by its path.

    Branch info is read when the object is created; the log is read on first
    access to :attr:`log` and kept for the lifetime of the object.
    """

    def __init__(
        self,
        path: str | Path,
        runner: Optional[CommandRunner] = None,
        config: Optional["BzrConfig"] = None,
    ):
        branch_path = Path(path)
        if not branch_path.exists() or not os.access(branch_path, os.R_OK):
            raise PathError(f"no such file / not readable: {branch_path}")

        self.runner = runner or _default_runner(config)
        self.log_forward = config.log_forward if config is not None else True
        Branch.is_branch(branch_path, self.runner)

        self.path = branch_path
        self._log: Optional[Log] = None
        self.info = self._create_info()

    @staticmethod
    def is_branch(path: str | Path, runner: Optional[CommandRunner] = None) -> bool:
        """Check that ``path`` is a Bazaar branch.

        Returns ``True`` or raises :class:`NotABranchError` when ``bzr
        version-info`` fails or prints nothing.
        """
        active_runner = runner or _default_runner(None)
        try:
            lines = active_runner.run(VERSION_INFO_COMMAND, Path(path))
        except SubprocessError as e:
            logger.warning("Branch check failed for %s: %s", path, e)
            raise NotABranchError(f"Not a branch: {path}") from e

        if not lines:
            raise NotABranchError(f"Not a branch: {path}")
        return True

    @property
    def log(self) -> Log:
        if self._log is None:
            self._log = self.fetch_log(forward=self.log_forward)
        return self._log

    def fetch_log(self, forward: bool = True, start: int = 1, stop: int = -1) -> Log:
        """Read the log for revisions ``start..stop`` without caching it.

        Parameters
        ----------
        forward:
            Oldest revision first when true
        start:
            First revision number
        stop:
            Last revision number, ``-1`` for the latest
        """
        lines = self.runner.run(log_command(forward, start, stop), self.path)
        return parse_log(lines)

    def last_commits(
        self, num: int, callback: Optional[Callable[[Commit], None]] = None
    ) -> List[Commit]:
        """Return the last ``num`` commits of :attr:`log`.

        ``num`` beyond the log length returns the whole log. When ``callback``
        is given it is called for each returned commit in order.
        """
        commits = self.log.last(num)
        if callback is not None:
            for commit in commits:
                callback(commit)
        return commits

    def _create_info(self) -> BranchInfo:
        return build_info(self.runner.run(VERSION_INFO_COMMAND, self.path))

    def __repr__(self) -> str:
        return f"Branch(path={str(self.path)!r}, revno={self.info.revno!r})"
