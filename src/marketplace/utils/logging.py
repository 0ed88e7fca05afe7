"""Logging setup shared by the API, the management commands and the tests.

The stdlib root logger owns the output streams (stdout plus two rotating
files, one of them errors only). structlog builds the event dicts on top of
it and renders them as JSON in deployed environments and as readable console
lines locally.

The environment comes from ``PROTEAN_ENV``; ``LOG_LEVEL`` overrides the
level derived from it.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

_DEPLOYED = ("production", "staging")

_DEFAULT_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_QUIET_LOGGERS = ("asyncio", "protean", "httpx", "uvicorn.access")

_MAX_LOG_BYTES = 10 * 1024 * 1024
_LOG_BACKUPS = 5


def current_environment() -> str:
    return os.getenv("PROTEAN_ENV", "development").lower()


def resolve_level(environment: str | None = None) -> str:
    environment = environment or current_environment()
    return os.getenv("LOG_LEVEL", _DEFAULT_LEVELS.get(environment, "INFO")).upper()


def _rotating(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    return handler


def _stdlib_handlers(level: str, log_dir: Path, prefix: str) -> list[logging.Handler]:
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)

    return [
        console,
        _rotating(log_dir / f"{prefix}.log", level),
        _rotating(log_dir / f"{prefix}_error.log", logging.ERROR),
    ]


def _renderer(environment: str):
    if environment in _DEPLOYED:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "marketplace") -> None:
    """Install handlers on the root logger and configure structlog."""
    environment = current_environment()
    level = (level or resolve_level(environment)).upper()

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = _stdlib_handlers(level, Path(log_dir), log_file_prefix)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(environment),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_request(**values) -> None:
    """Attach request-scoped values (method, path, ...) to every log line."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request() -> None:
    structlog.contextvars.clear_contextvars()
