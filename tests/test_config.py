"""Tests for spendlog.config."""

import stat
from pathlib import Path

import pytest

from spendlog.config import (
    create_default_config,
    get_config_path,
    get_display_currency,
    get_report_delay,
    load_config,
    load_settings,
    save_config,
    set_currency,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_respects_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "spendlog" / "config.toml"


class TestLoadSettings:
    """Tests for create_default_config and load_settings."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "missing.toml")

        assert settings["currency"] == "USD"
        assert settings["report_delay"] == 0.0

    def test_default_file(self, tmp_path: Path) -> None:
        path = tmp_path / "spendlog" / "config.toml"

        create_default_config(path)

        assert load_config(path)["currency"] == "USD"
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_partial_file_is_merged_with_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        save_config({"report_delay": 1.5}, path)

        assert get_display_currency(path) == "USD"
        assert get_report_delay(path) == 1.5

    def test_negative_delay_is_clamped(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        save_config({"report_delay": -3}, path)

        assert get_report_delay(path) == 0.0

    @pytest.mark.parametrize("value", ["slow", [1, 2], float("nan")])
    def test_unusable_delay_falls_back_to_default(self, tmp_path: Path, value: object) -> None:
        """Should ignore a hand-edited delay that is not a number."""
        path = tmp_path / "config.toml"
        save_config({"report_delay": value}, path)

        assert get_report_delay(path) == 0.0


class TestSetCurrency:
    """Tests for set_currency."""

    def test_saves_normalised_code(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        create_default_config(path)

        assert set_currency("egp", path) == "EGP"
        assert get_display_currency(path) == "EGP"

    def test_creates_file_when_missing(self, tmp_path: Path) -> None:
        path = tmp_path / "spendlog" / "config.toml"

        set_currency("EUR", path)

        assert load_config(path)["currency"] == "EUR"

    def test_unknown_currency_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"

        with pytest.raises(ValueError):
            set_currency("XYZ", path)

        assert not path.exists()
