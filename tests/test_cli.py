"""Tests for meshgaze.cli and meshgaze.logging_config."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from meshgaze.cli import build_overrides, main, parse_args
from meshgaze.logging_config import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("meshgaze")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:], logger.level, logger.propagate = saved


class TestParseArgs:
    def test_empty(self):
        args = parse_args([])
        assert build_overrides(args) == {}

    def test_overrides(self):
        args = parse_args(
            [
                "--source", "/tmp/status.json",
                "--command", "dump --json",
                "--instance", "net-a",
                "--rate-interval", "3",
                "--poll-interval", "0.5",
                "--si",
                "--log-file", "/tmp/meshgaze.log",
                "--log-level", "DEBUG",
            ]
        )
        assert build_overrides(args) == {
            "source_path": "/tmp/status.json",
            "source_command": "dump --json",
            "instance": "net-a",
            "rate_interval": 3.0,
            "poll_interval": 0.5,
            "si_units": True,
            "log_file": "/tmp/meshgaze.log",
            "log_level": "DEBUG",
        }

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--version"])
        assert "meshgaze" in capsys.readouterr().out


class TestMain:
    def test_runs_app_with_config(self, tmp_path):
        with patch("meshgaze.app.MeshgazeApp") as app_cls, patch(
            "meshgaze.cli.setup_logging"
        ) as setup:
            main(["--config", str(tmp_path / "none.toml"), "--instance", "net-a", "--si"])
        config = app_cls.call_args.args[0]
        assert config.instance == "net-a"
        assert config.si_units is True
        app_cls.return_value.run.assert_called_once()
        setup.assert_called_once_with(config.log_file, config.log_level)

    def test_bad_interval_exits_cleanly(self, tmp_path, monkeypatch):
        monkeypatch.delenv("MESHGAZE_RATE_INTERVAL", raising=False)
        with patch("meshgaze.app.MeshgazeApp") as app_cls:
            with pytest.raises(SystemExit) as excinfo:
                main(["--config", str(tmp_path / "none.toml"), "--rate-interval", "0"])
        assert excinfo.value.code == "meshgaze: rate_interval must be positive, got 0.0"
        app_cls.assert_not_called()


class TestSetupLogging:
    def test_null_handler_without_file(self, clean_logger):
        logger = setup_logging()
        assert logger is clean_logger
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.NullHandler)

    def test_file_handler(self, clean_logger, tmp_path):
        log_file = tmp_path / "meshgaze.log"
        setup_logging(str(log_file), "DEBUG")
        logging.getLogger("meshgaze.sampler").debug("sampler tick")
        assert "[DEBUG] meshgaze.sampler: sampler tick" in log_file.read_text()

    def test_idempotent(self, clean_logger, tmp_path):
        setup_logging(str(tmp_path / "a.log"))
        setup_logging(str(tmp_path / "a.log"))
        assert len(clean_logger.handlers) == 1

    def test_unknown_level_falls_back(self, clean_logger):
        logger = setup_logging(level="chatty")
        assert logger.level == logging.INFO
