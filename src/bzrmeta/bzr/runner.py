"""Execution of ``bzr`` sub-commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Protocol, Sequence

from ..errors import SubprocessError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class CommandRunner(Protocol):
    """Anything able to run a ``bzr`` sub-command and return its output lines."""

    def run(self, args: Sequence[str], cwd: Path) -> List[str]:
        ...


class SubprocessRunner:
    """Run ``bzr`` through :func:`subprocess.run` with a timeout."""

    def __init__(self, executable: str = "bzr", timeout: float = DEFAULT_TIMEOUT):
        self.executable = executable
        self.timeout = timeout

    def run(self, args: Sequence[str], cwd: Path) -> List[str]:
        """Run ``executable args`` inside ``cwd`` and return stdout split into lines.

        Parameters
        ----------
        args:
            Sub-command and flags, e.g. ``["log", "--forward"]``
        cwd:
            Working directory, normally the branch root

        Returns
        -------
        Output lines without trailing newlines

        Raises
        ------
        SubprocessError:
            If the process cannot start, times out or exits non-zero
        """
        command = [self.executable, *args]
        logger.debug("Running %s in %s", command, cwd)
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd),
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise SubprocessError(command, f"timed out after {self.timeout}s") from exc
        except OSError as exc:
            raise SubprocessError(command, str(exc)) from exc

        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            raise SubprocessError(
                command,
                stderr or f"exited with status {completed.returncode}",
                returncode=completed.returncode,
                stderr=stderr,
            )
        return completed.stdout.splitlines()


def log_command(forward: bool = True, start: int = 1, stop: int = -1) -> List[str]:
    """Build the arguments for ``bzr log`` over the revision range ``start..stop``."""
    args = ["log"]
    if forward:
        args.append("--forward")
    args.append(f"-r{start}..{stop}")
    return args


VERSION_INFO_COMMAND = ["version-info"]
