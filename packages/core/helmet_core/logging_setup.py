"""Structured local logging and crash hook setup."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import config_root


_LOGGER_NAME = "helmet_assets"
_CONTEXT_FIELDS = ("event", "flavor", "theme", "asset", "code", "crash_id")


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        for key in _CONTEXT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(
    level: str = "INFO",
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    path = (directory or log_dir()) / "helmet-assets.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.WARNING)
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def install_crash_hooks() -> None:
    logger = get_logger()

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        crash_id = str(uuid.uuid4())
        logger.critical(
            f"uncaught exception crash_id={crash_id}",
            exc_info=(exc_type, exc_value, exc_tb),
            extra={"event": "uncaught_exception", "crash_id": crash_id},
        )

    sys.excepthook = _log_uncaught
