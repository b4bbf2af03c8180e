"""
syscoin_da.logging
------------------

Logging setup for processes embedding the DA client:
- JSON lines or concise text format
- Safe JSON serialization (bytes -> hex, dataclasses -> dict)
- Stdlib only; the client modules just call ``logging.getLogger("syscoin_da.*")``

Usage
-----
    from syscoin_da import logging as dalog

    dalog.configure(level="INFO")            # once at process start
    log = dalog.get_logger("syscoin_da.app")
    log.info("submitting batch", extra={"batch": 7})

Environment
-----------
    SYSCOIN_DA_LOG_LEVEL=INFO        default level for configure_from_env()
    SYSCOIN_DA_LOG_JSON=1            JSON lines instead of text
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
import traceback
from dataclasses import asdict, is_dataclass
from typing import IO, Any, Dict, Optional

# LogRecord attributes that are not user supplied extras.
_RESERVED = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    )
)

_LEVEL_TO_INT = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _coerce_value(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return bytes(v).hex()
    if isinstance(v, _dt.datetime):
        if v.tzinfo is None:
            v = v.replace(tzinfo=_dt.timezone.utc)
        return v.isoformat()
    if is_dataclass(v) and not isinstance(v, type):
        return asdict(v)
    return str(v)


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: _coerce_value(v)
        for k, v in record.__dict__.items()
        if not k.startswith("_") and k not in _RESERVED
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in _extras(record).items():
            payload.setdefault(k, v)
        if record.exc_info:
            payload["err"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return json.dumps(payload, separators=(",", ":"), default=str)


class TextFormatter(logging.Formatter):
    """
    One-liner:
      2025-01-05T12:34:56.789+00:00 | INFO  | syscoin_da.client | blob submitted ...
    """

    def format(self, record: logging.LogRecord) -> str:
        line = f"{_utcnow_iso()} | {record.levelname:<5} | {record.name} | {record.getMessage()}"
        extras = _extras(record)
        if extras:
            line += " | " + " ".join(f"{k}={v}" for k, v in extras.items())
        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return line


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    try:
        return _LEVEL_TO_INT[level.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def configure(
    *,
    json_format: bool = False,
    level: str | int = "INFO",
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Attach a console handler to the ``syscoin_da`` logger and return it.
    Existing handlers installed by a previous call are replaced.
    """
    lvl = _coerce_level(level)
    logger = logging.getLogger("syscoin_da")
    logger.setLevel(lvl)
    for h in list(logger.handlers):
        if getattr(h, "_syscoin_da", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(lvl)
    handler.setFormatter(JSONFormatter() if json_format else TextFormatter())
    handler._syscoin_da = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    return handler


def configure_from_env() -> logging.Handler:
    level = os.environ.get("SYSCOIN_DA_LOG_LEVEL") or "INFO"
    as_json = (os.environ.get("SYSCOIN_DA_LOG_JSON") or "").strip().lower() in ("1", "true", "yes", "on")
    return configure(json_format=as_json, level=level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "configure_from_env",
    "get_logger",
]
