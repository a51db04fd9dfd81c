"""Structured JSON logging configuration.

Configures Python stdlib logging to emit one JSON object per line on stdout,
with ``severity``/``timestamp``/``logger`` field names that log collectors
pick up without extra parsing rules.

Usage:
    from kakaolink.logging_config import configure_logging
    configure_logging()
"""

import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "kakaolink",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    ``level`` overrides the root level, normally from ``Settings.log_level``.
    """
    config = {**LOGGING_CONFIG, "root": {**LOGGING_CONFIG["root"], "level": level.upper()}}
    logging.config.dictConfig(config)
