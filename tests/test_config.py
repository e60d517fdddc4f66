"""Tests for configuration loading."""

import pytest
from pathlib import Path

from interactions.config import load_config
from interactions.storage import TeamStore

_ENV_KEYS = [
    "INTERACTIONS_WORKSPACE",
    "INTERACTIONS_SHARED_DIR",
    "INTERACTIONS_PRIVATE_DIR",
    "INTERACTIONS_USER",
    "INTERACTIONS_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config(tmp_path / "absent.toml")
        assert config.storage.workspace == Path.cwd()
        assert config.storage.shared_dir == ".team"
        assert config.storage.private_dir == ".personal"
        assert config.user is None
        assert config.log_level == "INFO"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("INTERACTIONS_WORKSPACE", str(tmp_path / "ws"))
        monkeypatch.setenv("INTERACTIONS_USER", "alice@example.com")

        config = load_config()
        assert config.storage.workspace == tmp_path / "ws"
        assert config.user == "alice@example.com"

    def test_toml_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        toml_path = tmp_path / "interactions.toml"
        toml_path.write_text(f"""
user = "bob@example.com"
log_level = "DEBUG"

[storage]
workspace = "{tmp_path / 'repo'}"
shared_dir = "team-data"
""")
        config = load_config(toml_path)
        assert config.user == "bob@example.com"
        assert config.log_level == "DEBUG"
        assert config.storage.workspace == tmp_path / "repo"
        assert config.storage.shared_dir == "team-data"
        assert config.storage.private_dir == ".personal"

    def test_toml_in_cwd_is_found(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "interactions.toml").write_text('user = "carol@example.com"\n')
        assert load_config().user == "carol@example.com"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("INTERACTIONS_SHARED_DIR", ".shared")
        toml_path = tmp_path / "interactions.toml"
        toml_path.write_text("""
[storage]
shared_dir = "team-data"
""")
        config = load_config(toml_path)
        assert config.storage.shared_dir == ".shared"  # env wins

    def test_store_from_config(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("INTERACTIONS_WORKSPACE", str(tmp_path))
        store = TeamStore.from_config(load_config())
        assert store.shared_root == tmp_path / ".team"
        assert store.private_root == tmp_path / ".personal"
