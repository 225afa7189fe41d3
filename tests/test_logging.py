"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import sys

from fintrack.config import BaseConfig
from fintrack.logging_config import JSONFormatter, get_logger, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="fintrack.test",
        level=kwargs.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=kwargs.pop("msg", "Test message"),
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "fintrack.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "exception" not in log_data


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(transaction_id=7)))

    assert log_data["extra"] == {"transaction_id": 7}


def test_setup_logging_writes_json_file(tmp_path, monkeypatch):
    monkeypatch.setenv("FINTRACK_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("FINTRACK_DATABASE_URL", raising=False)
    config = BaseConfig()

    logger = setup_logging(config)
    get_logger("services.ledger").info("hello", extra={"answer": 42})
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "fintrack.log"
    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[0]["message"] == "Logging initialized"
    assert lines[-1]["message"] == "hello"
    assert lines[-1]["logger"] == "fintrack.services.ledger"
    assert lines[-1]["extra"] == {"answer": 42}


def test_setup_logging_does_not_duplicate_handlers(tmp_path, monkeypatch):
    monkeypatch.setenv("FINTRACK_DATA_DIR", str(tmp_path))
    config = BaseConfig()

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger_namespaces():
    assert get_logger("cli").name == "fintrack.cli"
    assert get_logger("fintrack.errors").name == "fintrack.errors"


def test_json_formatter_skips_console_asctime():
    record = _record(answer=42)
    logging.Formatter("%(asctime)s %(message)s").format(record)

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"answer": 42}
