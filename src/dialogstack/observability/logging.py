"""Structured logging configuration for dialogstack.

Log records from the dialog engine carry ``conversation_id``, ``dialog_id``
and ``depth`` in ``extra``. The JSON file handler always writes these three
fields, as null when a record does not set them, so log lines of one
conversation can be filtered and ordered by stack depth.
"""

import logging
import logging.config
from collections.abc import MutableMapping
from typing import Any

DIALOG_FIELDS = ("conversation_id", "dialog_id", "depth")


class DialogFieldsFilter(logging.Filter):
    """Give every record the dialog fields, defaulting to None."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in DIALOG_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, None)
        return True


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure logging for dialogstack.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a rotating JSON log file
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "dialog_fields": {"()": DialogFieldsFilter},
        },
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "dialogstack": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if log_file:
        fields = " ".join(f"%({field})s" for field in DIALOG_FIELDS)
        config["formatters"]["json"] = {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": f"%(asctime)s %(name)s %(levelname)s {fields} %(message)s",
        }
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "filters": ["dialog_fields"],
            "level": level,
        }
        config["loggers"]["dialogstack"]["handlers"].append("file")

    logging.config.dictConfig(config)


class DialogLoggerAdapter(logging.LoggerAdapter):
    """Adapter whose bound context is merged with per-call ``extra``.

    Per-call values win, so a runner bound to a conversation can still log
    the dialog id of each frame it touches.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**(self.extra or {}), **kwargs.get("extra", {})}
        return msg, kwargs


class ContextLogger:
    """Logger that binds conversation context to its records."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def with_context(self, **context: Any) -> DialogLoggerAdapter:
        """Bind context fields (e.g. conversation_id) to every record."""
        return DialogLoggerAdapter(self.logger, context)

    def for_conversation(self, conversation_id: str) -> DialogLoggerAdapter:
        return self.with_context(conversation_id=conversation_id)
