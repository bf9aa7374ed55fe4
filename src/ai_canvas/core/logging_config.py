import logging
import sys
import json

# Attributes callers may attach with ``extra=`` that are copied into the JSON line
CONTEXT_FIELDS = ("path", "status_code", "provider", "session_id")

QUIET_LOGGERS = ("httpx", "httpcore", "urllib3", "stripe")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for CloudWatch and other line-based collectors."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO") -> None:
    """Send every log record to stdout as JSON at ``level``."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    for existing in list(root.handlers):
        root.removeHandler(existing)

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(JsonFormatter())
    root.addHandler(stream)

    # request-level INFO lines from the HTTP and Stripe clients
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
