import json
import logging

import structlog

from gateway.config import Settings
from gateway.utils.logging import get_logger, setup_logging


def last_line(capsys):
    return capsys.readouterr().out.strip().splitlines()[-1]


def test_json_output_carries_extra_fields(capsys):
    setup_logging(Settings(log_format="json"))

    get_logger("gateway.test").info(
        "POST /upload",
        extra={"request_id": "req-1", "status_code": 200, "duration_ms": 12},
    )

    payload = json.loads(last_line(capsys))
    assert payload["event"] == "POST /upload"
    assert payload["level"] == "info"
    assert payload["logger"] == "gateway.test"
    assert payload["request_id"] == "req-1"
    assert payload["status_code"] == 200
    assert payload["duration_ms"] == 12
    assert "timestamp" in payload


def test_text_output_is_not_json(capsys):
    setup_logging(Settings(log_format="text"))

    get_logger("gateway.test").warning("storage disabled")

    line = last_line(capsys)
    assert "storage disabled" in line
    assert not line.startswith("{")


def test_setup_logging_applies_level_and_formatter():
    setup_logging(Settings(log_level="debug", log_format="json"))

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    setup_logging(Settings())
    assert logging.getLogger().level == logging.INFO
