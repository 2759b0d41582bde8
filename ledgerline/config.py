"""Configuration file management for ledgerline."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULT_LEDGER_FILE = "transactions.csv"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "ledgerline" / "config.toml"


def default_config() -> dict[str, Any]:
    return {"ledger_file": DEFAULT_LEDGER_FILE}


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, falling back to defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary. Keys missing from the file take default values.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = default_config()
    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        config.update(tomllib.load(f))
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_ledger_path(override: str | None = None, config_path: Path | None = None) -> Path:
    """Resolve the ledger file location.

    Args:
        override: Path given on the command line; wins over the config file.
        config_path: Path to config file. If None, uses default location.

    Returns:
        Path to the ledger file. Relative paths are relative to the working directory.
    """
    if override:
        return Path(override).expanduser()

    config = load_config(config_path)
    return Path(str(config["ledger_file"])).expanduser()
