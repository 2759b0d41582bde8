"""Tests for ledgerline.config."""

import stat
from pathlib import Path

import pytest

from ledgerline.config import (
    create_default_config,
    get_config_path,
    get_ledger_path,
    load_config,
    save_config,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should respect XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "ledgerline" / "config.toml"

    def test_falls_back_to_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use ~/.config when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert get_config_path() == tmp_path / ".config" / "ledgerline" / "config.toml"


class TestLoadConfig:
    """Tests for load_config and save_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to defaults without a config file."""
        config = load_config(tmp_path / "absent.toml")

        assert config == {"ledger_file": "transactions.csv"}

    def test_default_config_is_private(self, tmp_path: Path) -> None:
        """Should write the default config with 0600 permissions."""
        config_path = tmp_path / "ledgerline" / "config.toml"

        create_default_config(config_path)

        assert load_config(config_path)["ledger_file"] == "transactions.csv"
        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_saved_values_override_defaults(self, tmp_path: Path) -> None:
        """Should read back saved settings."""
        config_path = tmp_path / "config.toml"

        save_config({"ledger_file": "/data/money.csv"}, config_path)

        assert load_config(config_path)["ledger_file"] == "/data/money.csv"


class TestGetLedgerPath:
    """Tests for get_ledger_path."""

    def test_override_wins(self, tmp_path: Path) -> None:
        """Should prefer the command-line path over the config."""
        config_path = tmp_path / "config.toml"
        save_config({"ledger_file": "configured.csv"}, config_path)

        assert get_ledger_path("cli.csv", config_path) == Path("cli.csv")

    def test_uses_config_value(self, tmp_path: Path) -> None:
        """Should use the configured ledger file."""
        config_path = tmp_path / "config.toml"
        save_config({"ledger_file": "configured.csv"}, config_path)

        assert get_ledger_path(None, config_path) == Path("configured.csv")

    def test_default_is_relative_to_working_directory(self, tmp_path: Path) -> None:
        """Should default to transactions.csv in the working directory."""
        assert get_ledger_path(None, tmp_path / "absent.toml") == Path("transactions.csv")
