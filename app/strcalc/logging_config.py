"""
Logging Configuration

Logging for strcalc: JSON or plain text on stderr, an optional log file,
and a per-request correlation ID on every record.
"""

import logging
import sys
import json
from typing import Optional, Dict, Any
from contextvars import ContextVar

_correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

_logging_configured = False

ROOT_LOGGER = "strcalc"
PLAIN_FORMAT = "%(asctime)s %(levelname)-7s [%(correlation_id)s] %(name)s: %(message)s"

# Attributes every LogRecord has; anything else came in through `extra=`
_STANDARD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "correlation_id"}


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID."""
    return _correlation_id_ctx.get()


def set_correlation_id(correlation_id: Optional[str]) -> None:
    """Set the current correlation ID."""
    _correlation_id_ctx.set(correlation_id)


class CorrelationIdFilter(logging.Filter):
    """Stamps each record with the current correlation ID ("-" if unset)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }

        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id and correlation_id != "-":
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(
            (key, value) for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and key not in log_data
        )
        return json.dumps(log_data, default=str)


def _build_handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = True,
    force: bool = False,
) -> None:
    """
    Configure the strcalc logger tree.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to also write logs to
        json_format: JSON records if True, plain text otherwise
        force: Replace an earlier configuration instead of keeping it
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    formatter = JSONFormatter() if json_format else logging.Formatter(PLAIN_FORMAT)

    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(_build_handler(logging.StreamHandler(sys.stderr), formatter))
    if log_file:
        package_logger.addHandler(_build_handler(logging.FileHandler(log_file), formatter))

    # Quieter web stack
    for noisy in ("httpx", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the `strcalc.<name>` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
