from __future__ import annotations

import json

import pytest

from bzrmeta.cli import main
from bzrmeta.config import BzrConfig


def _run(capsys, base_dir, fake_bzr, *argv: str) -> str:
    main(["--base-dir", str(base_dir), "--bzr", fake_bzr, *argv])
    return capsys.readouterr().out


def test_info_command(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    out = _run(capsys, tmp_path / "state", fake_bzr, "info", str(branch_dir))

    assert "Nick        : rubzr" in out
    assert "Revision    : 3" in out


def test_info_json(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    out = _run(capsys, tmp_path / "state", fake_bzr, "info", str(branch_dir), "--json")

    data = json.loads(out)
    assert data["revno"] == "3"
    assert data["date"] == "2007-08-22T11:22:03+02:00"


def test_log_last_json(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    out = _run(
        capsys, tmp_path / "state", fake_bzr, "log", str(branch_dir), "--last", "2", "--json"
    )

    assert [entry["revno"] for entry in json.loads(out)] == ["2", "3"]


def test_log_reverse(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    out = _run(capsys, tmp_path / "state", fake_bzr, "log", str(branch_dir), "--reverse")

    lines = [line.split()[0] for line in out.splitlines() if not line.startswith(" " * 8)]
    assert lines == ["3", "2", "1"]


def test_not_a_branch_is_reported(capsys, tmp_path, fake_bzr) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()

    out = _run(capsys, tmp_path / "state", fake_bzr, "info", str(plain))

    assert out.startswith("Error: Not a branch")


def test_branch_registry(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    state = tmp_path / "state"

    out = _run(capsys, state, fake_bzr, "branch", "add", str(branch_dir), "--name", "rubzr")
    assert "Added branch 'rubzr'" in out
    assert BzrConfig(base_dir=state).load_branches() == {"rubzr": str(branch_dir.resolve())}

    out = _run(capsys, state, fake_bzr, "branch", "add", str(branch_dir), "--name", "rubzr")
    assert "already registered" in out

    out = _run(capsys, state, fake_bzr, "info", "rubzr")
    assert "Revision    : 3" in out

    out = _run(capsys, state, fake_bzr, "branch", "list")
    assert "rubzr:" in out

    out = _run(capsys, state, fake_bzr, "branch", "remove", "rubzr")
    assert "Removed branch 'rubzr'" in out
    assert BzrConfig(base_dir=state).load_branches() == {}


def test_corrupt_registry_reads_as_empty(tmp_path) -> None:
    config = BzrConfig(base_dir=tmp_path)
    config.branches_config_path().write_text("{not json", encoding="utf-8")

    assert config.load_branches() == {}


def test_negative_last_is_rejected(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--bzr", fake_bzr, "log", str(branch_dir), "--last", "-1"])

    assert excinfo.value.code == 2
    assert "count must not be negative" in capsys.readouterr().err


def test_read_only_commands_do_not_create_base_dir(capsys, tmp_path, fake_bzr, branch_dir) -> None:
    state = tmp_path / "state"

    _run(capsys, state, fake_bzr, "info", str(branch_dir))
    _run(capsys, state, fake_bzr, "branch", "list")

    assert not state.exists()
