"""Configuration for reading Bazaar branches from a developer machine."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from .bzr.runner import DEFAULT_TIMEOUT, SubprocessRunner


@dataclass(slots=True)
class BzrConfig:
    """Runtime configuration.

    Attributes
    ----------
    base_dir:
        Directory holding the branch registry. Defaults to ``~/.bzrmeta``.
    executable:
        Name or path of the ``bzr`` binary.
    timeout:
        Seconds a single ``bzr`` invocation may run before it is aborted.
    log_forward:
        Whether logs are read oldest-first (``bzr log --forward``).
    """

    base_dir: Path = field(default_factory=lambda: Path.home() / ".bzrmeta")
    executable: str = "bzr"
    timeout: float = DEFAULT_TIMEOUT
    log_forward: bool = True

    def make_runner(self) -> SubprocessRunner:
        return SubprocessRunner(executable=self.executable, timeout=self.timeout)

    def branches_config_path(self) -> Path:
        """Return path to the registered branches file."""
        return self.base_dir / "branches.json"

    def load_branches(self) -> Dict[str, str]:
        """Load registered branches.

        Returns
        -------
        Dictionary mapping branch name to branch path. A missing or
        unreadable file yields an empty mapping.
        """
        config_path = self.branches_config_path()
        if not config_path.exists():
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}

    def save_branches(self, branches: Dict[str, str]) -> None:
        """Save registered branches.

        Parameters
        ----------
        branches:
            Dictionary mapping branch name to branch path
        """
        config_path = self.branches_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(branches, f, indent=2)


DEFAULT_CONFIG = BzrConfig()
