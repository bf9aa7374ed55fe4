import json
import logging

from ai_canvas.core.logging_config import JsonFormatter, configure_logging


def make_record(**extra):
    record = logging.LogRecord("ai_canvas.test", logging.WARNING, __file__, 12, "Stripe said %s", ("no",), None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_fields():
    entry = json.loads(JsonFormatter().format(make_record()))

    assert entry["level"] == "WARNING"
    assert entry["logger"] == "ai_canvas.test"
    assert entry["message"] == "Stripe said no"
    assert entry["location"].endswith(":12")
    assert "path" not in entry


def test_json_formatter_copies_request_context():
    entry = json.loads(JsonFormatter().format(make_record(path="/api/generate", status_code=500, other="x")))

    assert entry["path"] == "/api/generate"
    assert entry["status_code"] == 500
    assert "other" not in entry


def test_configure_logging_quiets_http_clients():
    configure_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("stripe").level == logging.WARNING
