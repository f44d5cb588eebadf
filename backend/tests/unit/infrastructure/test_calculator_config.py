"""Unit tests for calculator configuration loading.

Tests focus on:
- Defaults with no env vars
- Parsing of numbers and flags
- Range errors
- .env file loading
"""

import os

import pytest

from fitcalc.domain.shared.errors import ConfigurationError, InvalidSettingError
from fitcalc.infrastructure.config import CalculatorSettings, load_settings

FITCALC_VARS = (
    "FITCALC_PROTEIN_PER_KG",
    "FITCALC_PROTEIN_PER_POUND",
    "FITCALC_MEASUREMENTS_OPTIONAL",
    "FITCALC_LOG_LEVEL",
    "FITCALC_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env():
    """Remove FITCALC_* vars before and after each test."""
    saved = {name: os.environ.pop(name) for name in FITCALC_VARS if name in os.environ}
    yield
    for name in FITCALC_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)


class TestLoadSettings:
    """Test load_settings from environment."""

    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings == CalculatorSettings()
        assert settings.protein_per_kg == 0.8
        assert settings.protein_per_pound is True
        assert settings.measurements_optional is True
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_explicit_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", "1.6")
        monkeypatch.setenv("FITCALC_PROTEIN_PER_POUND", "false")
        monkeypatch.setenv("FITCALC_MEASUREMENTS_OPTIONAL", "0")
        monkeypatch.setenv("FITCALC_LOG_LEVEL", "debug")
        monkeypatch.setenv("FITCALC_LOG_FORMAT", "JSON")

        settings = load_settings()

        assert settings.protein_per_kg == 1.6
        assert settings.protein_per_pound is False
        assert settings.measurements_optional is False
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    @pytest.mark.parametrize("raw", ["0.05", "5.5", "nan"])
    def test_protein_out_of_range_raises(self, monkeypatch: pytest.MonkeyPatch, raw) -> None:
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", raw)

        with pytest.raises(InvalidSettingError, match="FITCALC_PROTEIN_PER_KG"):
            load_settings()

    def test_protein_not_a_number_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", "lots")

        with pytest.raises(ConfigurationError, match="must be a number"):
            load_settings()

    def test_bad_flag_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FITCALC_PROTEIN_PER_POUND", "maybe")

        with pytest.raises(ConfigurationError, match="FITCALC_PROTEIN_PER_POUND"):
            load_settings()

    def test_bad_log_format_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FITCALC_LOG_FORMAT", "xml")

        with pytest.raises(InvalidSettingError):
            load_settings()

    def test_env_file_is_loaded(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("FITCALC_PROTEIN_PER_KG=1.2\nFITCALC_LOG_FORMAT=json\n")

        settings = load_settings(env_file)

        assert settings.protein_per_kg == 1.2
        assert settings.log_format == "json"

    def test_environment_wins_over_env_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("FITCALC_PROTEIN_PER_KG=1.2\n")
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", "2.0")

        assert load_settings(env_file).protein_per_kg == 2.0

    def test_missing_env_file_is_ignored(self, tmp_path) -> None:
        assert load_settings(tmp_path / "absent.env") == CalculatorSettings()
