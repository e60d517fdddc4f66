"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from interactions.__main__ import main
from interactions.models import Member, Team, TeamConfig
from interactions.storage import TeamStore


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INTERACTIONS_WORKSPACE", str(tmp_path))
    for key in ["INTERACTIONS_SHARED_DIR", "INTERACTIONS_PRIVATE_DIR", "INTERACTIONS_USER"]:
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def team_store(workspace: Path) -> TeamStore:
    store = TeamStore.for_workspace(workspace)
    store.initialize_team(
        Team("Engineering", leaders=["lead@x.io"]),
        TeamConfig.with_defaults(),
        Member("lead@x.io", name="Lead"),
        "4321",
    )
    return store


class TestStatus:
    def test_not_initialized(self, workspace: Path, capsys):
        assert main(["status"]) == 1
        assert "Not initialized" in capsys.readouterr().out

    def test_initialized(self, team_store: TeamStore, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Team: Engineering" in out
        assert "Members: 1" in out

    def test_corrupt_team_record(self, team_store: TeamStore, capsys):
        team_store.team_path.write_text("name: [broken\n", encoding="utf-8")
        assert main(["status"]) == 1
        assert "Unreadable team record" in capsys.readouterr().out


class TestMembers:
    def test_lists_display_names(self, team_store: TeamStore, capsys):
        assert main(["members"]) == 0
        assert "lead@x.io  Lead" in capsys.readouterr().out


class TestVerify:
    def test_accepts(self, team_store: TeamStore, monkeypatch):
        monkeypatch.setattr("getpass.getpass", lambda prompt="": "4321")
        assert main(["verify", "lead@x.io"]) == 0

    def test_rejects(self, team_store: TeamStore, monkeypatch):
        monkeypatch.setattr("getpass.getpass", lambda prompt="": "0000")
        assert main(["verify", "lead@x.io"]) == 1

    def test_missing_credentials(self, team_store: TeamStore, monkeypatch, capsys):
        monkeypatch.setattr("getpass.getpass", lambda prompt="": "0000")
        assert main(["verify", "nobody@x.io"]) == 2
        assert "Credentials not found" in capsys.readouterr().out


def test_unknown_command(workspace: Path):
    assert main(["bogus"]) == 1
