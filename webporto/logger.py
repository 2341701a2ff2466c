"""Structured JSON logging with a process-wide default logger."""

from __future__ import annotations

import json
import sys
import threading
from collections.abc import Mapping
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Any, TextIO

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_RESERVED = ("time", "msg", "level")


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


_LEVEL_NAMES = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseException):
        return str(value)
    return value


class _Sink:
    """Level threshold and output streams shared by a logger and its children."""

    def __init__(self, level: LogLevel, outputs: list[TextIO]):
        self.level = level
        self.outputs = outputs
        self._lock = threading.Lock()

    def emit(self, level: LogLevel, message: str, fields: Mapping[str, Any]) -> None:
        if level < self.level:
            return
        record: dict[str, Any] = {}
        for key, value in fields.items():
            name = f"fields.{key}" if key in _RESERVED else key
            record[name] = _jsonable(value)
        record["time"] = datetime.now().strftime(TIMESTAMP_FORMAT)
        record["msg"] = message
        record["level"] = _LEVEL_NAMES[level]
        line = json.dumps(record, sort_keys=True, ensure_ascii=False, default=str) + "\n"
        with self._lock:
            for out in self.outputs:
                out.write(line)
                flush = getattr(out, "flush", None)
                if flush is not None:
                    flush()


class AppLogger:
    """A logger that writes one JSON object per line, carrying bound fields."""

    def __init__(self, sink: _Sink, fields: Mapping[str, Any] | None = None):
        self._sink = sink
        self.fields: dict[str, Any] = dict(fields or {})

    def _log(self, level: LogLevel, message: str, extra: tuple[Mapping[str, Any], ...]) -> None:
        merged = dict(self.fields)
        for field_set in extra:
            merged.update(field_set)
        self._sink.emit(level, message, merged)

    def debug(self, message: str, *fields: Mapping[str, Any]) -> None:
        self._log(LogLevel.DEBUG, message, fields)

    def info(self, message: str, *fields: Mapping[str, Any]) -> None:
        self._log(LogLevel.INFO, message, fields)

    def warn(self, message: str, *fields: Mapping[str, Any]) -> None:
        self._log(LogLevel.WARN, message, fields)

    def error(self, message: str, *fields: Mapping[str, Any]) -> None:
        self._log(LogLevel.ERROR, message, fields)

    def fatal(self, message: str, *fields: Mapping[str, Any]) -> None:
        """Log at fatal level; the process keeps running."""
        self._log(LogLevel.FATAL, message, fields)

    def with_fields(self, fields: Mapping[str, Any]) -> AppLogger:
        """Return a child logger with these fields added to the bound ones."""
        return AppLogger(self._sink, {**self.fields, **fields})


def _open_log_file() -> TextIO | None:
    log_dir = Path("log")
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Failed to create log directory: {exc}")
        return None
    try:
        return (log_dir / "app.log").open("a", encoding="utf-8")
    except OSError as exc:
        print(f"Failed to open log file: {exc}")
        return None


def new_logger(level: LogLevel | int, *outputs: TextIO) -> AppLogger:
    """Create a logger; with no outputs it writes to stdout and ``log/app.log``."""
    try:
        level = LogLevel(level)
    except ValueError:
        level = LogLevel.INFO
    streams = list(outputs)
    if not streams:
        streams = [sys.stdout]
        log_file = _open_log_file()
        if log_file is not None:
            streams.append(log_file)
    return AppLogger(_Sink(level, streams))


def new_development_logger() -> AppLogger:
    return new_logger(LogLevel.DEBUG)


def new_production_logger() -> AppLogger:
    return new_logger(LogLevel.INFO)


_default_logger: AppLogger | None = None
_default_lock = threading.Lock()


def set_default_logger(logger: AppLogger | None) -> None:
    """Replace the process-wide logger; ``None`` is ignored."""
    global _default_logger
    if logger is not None:
        with _default_lock:
            _default_logger = logger


def get_logger() -> AppLogger:
    """Return the process-wide logger, creating a development logger on first use."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = new_development_logger()
        return _default_logger


class RequestLogger:
    """A logger bound to one request id, with helpers for common events."""

    def __init__(self, base_logger: AppLogger, request_id: str):
        self.request_id = request_id
        self.logger = base_logger.with_fields({"request_id": request_id})

    def debug(self, message: str, *fields: Mapping[str, Any]) -> None:
        self.logger.debug(message, *fields)

    def info(self, message: str, *fields: Mapping[str, Any]) -> None:
        self.logger.info(message, *fields)

    def warn(self, message: str, *fields: Mapping[str, Any]) -> None:
        self.logger.warn(message, *fields)

    def error(self, message: str, *fields: Mapping[str, Any]) -> None:
        self.logger.error(message, *fields)

    def fatal(self, message: str, *fields: Mapping[str, Any]) -> None:
        self.logger.fatal(message, *fields)

    def with_fields(self, fields: Mapping[str, Any]) -> AppLogger:
        return self.logger.with_fields(fields)

    def log_request(self, method: str, path: str, client_ip: str, duration: int) -> None:
        self.info("HTTP request", {
            "method": method,
            "path": path,
            "client_ip": client_ip,
            "duration": duration,
        })

    def log_error(self, err: BaseException | str, context: str) -> None:
        self.error(f"Error in {context}: {err}", {"error": str(err), "context": context})

    def log_business_operation(self, operation: str, entity: str, entity_id: Any) -> None:
        self.info("Business operation", {
            "operation": operation,
            "entity": entity,
            "entity_id": entity_id,
        })