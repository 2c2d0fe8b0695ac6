"""Tests for CLI logging configuration behavior."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from jfrog_cli_artifactory.logging_utils import configure_logging, resolve_log_level


def test_configure_logging_overwrites_previous_run_log(tmp_path: Path) -> None:
    """Each configure call should start a fresh log file for the new run."""
    log_path = tmp_path / "jfrog.log"

    first_logger = configure_logging(log_file=log_path, verbose=False)
    first_logger.info("from first run")

    second_logger = configure_logging(log_file=log_path, verbose=False)
    second_logger.info("from second run")

    content = log_path.read_text(encoding="utf-8")

    assert "from second run" in content
    assert "from first run" not in content


def test_verbose_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JFROG_CLI_LOG_LEVEL", "ERROR")
    assert resolve_log_level(verbose=True) == logging.DEBUG
    assert resolve_log_level(verbose=False) == logging.ERROR


def test_unknown_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JFROG_CLI_LOG_LEVEL", "chatty")
    assert resolve_log_level(verbose=False) == logging.INFO


def test_debug_records_are_filtered_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("JFROG_CLI_LOG_LEVEL", raising=False)
    log_path = tmp_path / "jfrog.log"
    logger = configure_logging(log_file=log_path, verbose=False)
    logger.debug("hidden detail")
    logger.info("visible")
    content = log_path.read_text(encoding="utf-8")
    assert "visible" in content
    assert "hidden detail" not in content
