from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest

FAKE_BZR = Path(__file__).resolve().parent / "fake_bzr.py"


@pytest.fixture
def fake_bzr(tmp_path) -> str:
    """Return an executable that behaves like ``bzr`` for a few commands."""
    script = tmp_path / "bin" / "bzr"
    script.parent.mkdir()
    script.write_text(
        f"#!{sys.executable}\n" + FAKE_BZR.read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return str(script)


@pytest.fixture
def branch_dir(tmp_path) -> Path:
    """Return a directory the fake ``bzr`` treats as a branch."""
    path = tmp_path / "rubzr"
    (path / ".bzr").mkdir(parents=True)
    return path
