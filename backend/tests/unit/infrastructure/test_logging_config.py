"""Unit tests for structlog configuration."""

import json

import pytest
import structlog

from fitcalc.infrastructure.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test console and JSON renderers and level filtering."""

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO", "json")

        structlog.get_logger("fitcalc.test").info("Calculated body metrics", bmi=24.69)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Calculated body metrics"
        assert event["bmi"] == 24.69
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING", "json")

        structlog.get_logger("fitcalc.test").debug("hidden")

        assert capsys.readouterr().out == ""

    def test_console_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("DEBUG", "console")

        structlog.get_logger("fitcalc.test").debug("Recalculating for target weight")

        assert "Recalculating for target weight" in capsys.readouterr().out
