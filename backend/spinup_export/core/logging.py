"""JSON logging setup."""

from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from .config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(service)s %(name)s %(message)s"


class ServiceFilter(logging.Filter):
    """Stamps every record with the service name."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = settings.app_name
        return True


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a JSON stream handler to the package logger once."""
    logger = logging.getLogger("spinup_export")
    logger.setLevel(getattr(logging, (level or settings.log_level).upper(), logging.INFO))
    if not any(getattr(handler, "_spinup", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(jsonlogger.JsonFormatter(_LOG_FORMAT))
        handler.addFilter(ServiceFilter())
        handler._spinup = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
