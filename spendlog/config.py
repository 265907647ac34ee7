"""Configuration file management for spendlog."""

import math
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from spendlog.currency import DEFAULT_CURRENCY, get_currency

DEFAULT_SETTINGS: dict[str, Any] = {
    "currency": DEFAULT_CURRENCY,
    # Seconds to "think" before showing a report; never changes the output
    "report_delay": 0.0,
}


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
    return get_xdg_config_home() / "spendlog" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(dict(DEFAULT_SETTINGS), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


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


def load_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Load settings with defaults filled in.

    A missing config file yields the defaults.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}
    return {**DEFAULT_SETTINGS, **config}


def get_display_currency(config_path: Path | None = None) -> str:
    """Currency code used for reports and listings."""
    return str(load_settings(config_path)["currency"])


def get_report_delay(config_path: Path | None = None) -> float:
    """Artificial delay before showing a report, never negative.

    A value that is not a number falls back to the default.
    """
    value = load_settings(config_path)["report_delay"]
    try:
        delay = float(value)
    except (TypeError, ValueError):
        return float(DEFAULT_SETTINGS["report_delay"])
    if not math.isfinite(delay):
        return float(DEFAULT_SETTINGS["report_delay"])
    return max(0.0, delay)


def set_currency(code: str, config_path: Path | None = None) -> str:
    """Validate and persist the display currency.

    Args:
        code: ISO currency code.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The normalised currency code that was saved.

    Raises:
        ValueError: If the currency is not supported.
    """
    currency = get_currency(code)
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = dict(DEFAULT_SETTINGS)
    config["currency"] = currency.code
    save_config(config, config_path)
    return currency.code
