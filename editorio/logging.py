"""편집기 파일 계층 로깅(KR). Logging for the editor file layer (EN).

모든 레코드는 JSON 한 줄로 기록되며, ``extra``로 넘긴 파일 문맥 필드
(``path``, ``operation``, ``encoding``)는 최상위 키로 승격됩니다.
Every record is written as one JSON line; file context passed through
``extra`` (``path``, ``operation``, ``encoding``) is promoted to top-level keys.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Sequence

LOGGER_NAMES: Sequence[str] = ("editorio", "scanner", "charset", "snapopen")
CONTEXT_FIELDS: Sequence[str] = ("path", "operation", "encoding")


def utc_now() -> str:
    '''UTC 현재 시각을 ISO8601로 반환 · Return UTC now as ISO8601.'''

    return datetime.now(tz=timezone.utc).isoformat(timespec="seconds")


def _record_time(record: logging.LogRecord) -> str:
    created = datetime.fromtimestamp(record.created, tz=timezone.utc)
    return created.isoformat(timespec="milliseconds")


class JsonFormatter(logging.Formatter):
    """파일 문맥을 포함하는 JSON 포맷터 · JSON formatter carrying file context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _record_time(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is None:
                continue
            payload[key] = os.fspath(value) if isinstance(value, os.PathLike) else value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(log_file: Path, level: str | int = "INFO") -> None:
    """패키지 로거를 JSON 파일 하나로 모은다 · Route package loggers to one JSON file.

    루트 로거는 건드리지 않으며 패키지 로거는 전파하지 않습니다.
    The root logger is left alone and package loggers stop propagating.
    """

    if isinstance(level, str):
        level = level.upper()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"json": {"()": JsonFormatter}},
            "handlers": {
                "editor_file": {
                    "class": "logging.FileHandler",
                    "formatter": "json",
                    "filename": str(log_file),
                    "encoding": "utf-8",
                }
            },
            "loggers": {
                name: {"level": level, "handlers": ["editor_file"], "propagate": False}
                for name in LOGGER_NAMES
            },
        }
    )


__all__ = ["CONTEXT_FIELDS", "JsonFormatter", "LOGGER_NAMES", "configure_logging", "utc_now"]
