"""Tests for structlog configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
import structlog

from kubefilter.models.config import LogConfig
from kubefilter.observability.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LogConfig(level="info"))
        get_logger("test").info("something_happened", count=2)

        captured = capsys.readouterr()
        assert captured.out == ""
        line = json.loads(captured.err.strip())
        assert line["event"] == "something_happened"
        assert line["component"] == "test"
        assert line["count"] == 2
        assert line["level"] == "info"
        assert "ts" in line

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LogConfig(level="warning"))
        log = get_logger("test")
        log.info("hidden")
        log.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_console_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(LogConfig(format="console"))
        get_logger("test").info("readable_line")

        err = capsys.readouterr().err
        assert "readable_line" in err
        assert not err.lstrip().startswith("{")

    def test_defaults(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging()
        log = get_logger("test")
        log.debug("hidden")
        log.info("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert json.loads(err.strip())["event"] == "shown"
