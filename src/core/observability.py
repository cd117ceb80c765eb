"""Logging estructurado del data layer.

Por qué aquí:
- Los adaptadores sólo conocen `log_error(domain, code, message, ...)`; el
  destino (consola, JSON, un agregador futuro) es decisión de este módulo.
- Nunca lanza: un fallo de logging no puede tumbar una pantalla.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from core.config import AppSettings

LOGGER_NAME = "hustlexp"

logger = logging.getLogger(LOGGER_NAME)

_EVENT_FIELDS = ("scope", "code", "screen", "adapter", "recoverable", "action", "meta", "timestamp")

_LEVELS = {"info": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}


class JsonEventFormatter(logging.Formatter):
    """Una línea JSON por evento, con los campos del evento en primer nivel."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EVENT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class PlainEventFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        scope = getattr(record, "scope", None) or "system"
        code = getattr(record, "code", None)
        head = f"[HUSTLEXP:{record.levelname}] {scope}"
        if code:
            head += f" {code}"
        line = f"{head}: {record.getMessage()}"
        meta = getattr(record, "meta", None)
        if meta:
            line += f" {json.dumps(meta, ensure_ascii=False, default=str, sort_keys=True)}"
        return line


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Instala (una vez) el handler del logger `hustlexp`."""

    settings = settings or AppSettings()
    logger.setLevel(settings.log_level.upper())
    for handler in list(logger.handlers):
        if getattr(handler, "_hustlexp", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonEventFormatter() if settings.log_json else PlainEventFormatter())
    handler._hustlexp = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def log(
    level: str,
    scope: str,
    message: str,
    *,
    code: str | None = None,
    screen: str | None = None,
    adapter: str | None = None,
    recoverable: bool | None = None,
    action: str | None = None,
    meta: dict[str, Any] | None = None,
) -> None:
    """Registra un evento. `level` es 'info', 'warn' o 'error'."""

    extra = {
        "scope": scope,
        "code": code,
        "screen": screen,
        "adapter": adapter,
        "recoverable": recoverable,
        "action": action,
        "meta": meta,
        "timestamp": _now_iso(),
    }
    logger.log(_LEVELS.get(level, logging.ERROR), message, extra=extra)


def log_info(scope: str, message: str, meta: dict[str, Any] | None = None) -> None:
    log("info", scope, message, meta=meta)


def log_error(
    domain: str,
    code: str,
    message: str,
    *,
    screen: str | None = None,
    adapter: str | None = None,
    recoverable: bool | None = None,
    action: str | None = None,
    meta: dict[str, Any] | None = None,
) -> None:
    log(
        "error",
        domain,
        message,
        code=code,
        screen=screen,
        adapter=adapter,
        recoverable=recoverable,
        action=action,
        meta=meta,
    )


# Transiciones de pantalla: nunca se loguean props ni PII.


def log_screen_transition(screen: str, from_state: str, to_state: str) -> None:
    log("info", "screen", "state_transition", screen=screen, meta={"from": from_state, "to": to_state})


def log_screen_mount(screen: str) -> None:
    log("info", "screen", "mounted", screen=screen)


def log_screen_unmount(screen: str) -> None:
    log("info", "screen", "unmounted", screen=screen)
