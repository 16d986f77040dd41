from __future__ import annotations

import logging
import sys
from typing import Any

from loguru import logger

_VALID_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
_SOURCE_WIDTH = 32

_STDLIB_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "httpx", "httpcore")


def _normalize_level(value: str | None, fallback: str = "INFO") -> str:
    candidate = (value or "").strip().upper()
    if candidate in _VALID_LEVELS:
        return candidate
    return fallback


def _patch_record(record: dict[str, Any]) -> None:
    extra = record["extra"]
    module = str(extra.get("py_name") or record.get("name") or "-").split(".")[-1]
    function = extra.get("py_func") or record.get("function")
    line = extra.get("py_line") or record.get("line")
    extra["src"] = f"{module}.{function}:{line}"


class InterceptHandler(logging.Handler):
    """Route stdlib logging records into Loguru with original call-site metadata."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(
            py_name=record.name,
            py_func=record.funcName,
            py_line=record.lineno,
        ).opt(
            exception=record.exc_info,
        ).log(level, record.getMessage())


def setup_logging(level: str = "INFO") -> str:
    """
    Configure Loguru and route uvicorn/fastapi/httpx stdlib loggers into it.

    Returns:
        The effective level name
    """
    level = _normalize_level(level)

    logger.remove()
    logger.configure(patcher=_patch_record)
    logger.add(
        sys.stderr,
        level=level,
        colorize=True,
        backtrace=False,
        diagnose=False,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[src]: <" + str(_SOURCE_WIDTH) + "}</cyan> | "
            "<level>{message}</level>"
        ),
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [InterceptHandler()]
    root_logger.setLevel(logging.getLevelName(level if level not in ("TRACE", "SUCCESS") else "INFO"))

    for name in _STDLIB_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [InterceptHandler()]
        stdlib_logger.propagate = False

    return level


def _serialize_field(value: Any) -> str:
    if isinstance(value, str):
        compact = value.replace("\n", "\\n")
        if (not compact) or any(ch in compact for ch in (" ", "|", "'")):
            escaped = compact.replace("'", "\\'")
            return f"'{escaped}'"
        return compact
    if value is None:
        return "None"
    return str(value)


def log_event(event: str, **fields: Any) -> str:
    """Build a consistent `evt=... | key=value` log message."""
    parts = [f"evt={event}"]
    for key, value in fields.items():
        parts.append(f"{key}={_serialize_field(value)}")
    return " | ".join(parts)
