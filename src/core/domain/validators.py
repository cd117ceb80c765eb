"""Validadores de entidades (parse, don't validate).

Cada función recibe JSON crudo, comprueba *todos* los campos requeridos antes
de leerlos y devuelve el modelo inmutable correspondiente. Si algo no cumple el
contrato lanza `InvalidResponseError` con la ruta del campo.

Semántica AND: basta una hoja inválida (o un contenedor ausente/None/no-objeto)
para invalidar el sub-objeto completo, y con él la ejecución del adaptador.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from core.domain import guards
from core.domain.errors import InvalidResponseError
from core.domain.models import (
    SYSTEM_STATUS_TONES,
    TASK_STATUSES,
    Destination,
    PosterSummary,
    SystemStatus,
    Task,
    TaskLocation,
    UserSummary,
    XPBreakdownItem,
    XPEntry,
)

_MISSING = object()


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def require_root(payload: Any) -> Mapping[str, Any]:
    """El payload completo debe ser un objeto JSON."""

    if not guards.is_object(payload):
        raise InvalidResponseError("<root>", "expected an object")
    return payload


def require_object(parent: Any, key: str, path: str = "") -> Mapping[str, Any]:
    """Devuelve `parent[key]` si es un objeto; si no, invalida."""

    if not guards.is_object(parent):
        raise InvalidResponseError(path or "<root>", "expected an object")
    value = parent.get(key)
    if not guards.is_object(value):
        raise InvalidResponseError(_join(path, key), "missing or not an object")
    return value


def require_string(raw: Mapping[str, Any], key: str, path: str) -> str:
    value = raw.get(key)
    if not guards.is_string(value):
        raise InvalidResponseError(_join(path, key), "expected a string")
    return value


def require_non_empty_string(raw: Mapping[str, Any], key: str, path: str) -> str:
    value = raw.get(key)
    if not guards.is_non_empty_string(value):
        raise InvalidResponseError(_join(path, key), "expected a non-empty string")
    return value


def require_number(raw: Mapping[str, Any], key: str, path: str) -> int | float:
    value = raw.get(key)
    if not guards.is_finite_number(value):
        raise InvalidResponseError(_join(path, key), "expected a finite number")
    return value


def optional_number(
    raw: Mapping[str, Any],
    key: str,
    path: str,
    default: int | float | None = 0,
) -> int | float | None:
    """Número opcional: ausente/None -> `default`; presente y no numérico -> inválido."""

    value = raw.get(key)
    if value is None:
        return default
    if not guards.is_finite_number(value):
        raise InvalidResponseError(_join(path, key), "expected a finite number or null")
    return value


def optional_string(raw: Mapping[str, Any], key: str, path: str) -> str | None:
    value = raw.get(key)
    if not guards.is_nullable_string(value):
        raise InvalidResponseError(_join(path, key), "expected a string or null")
    return value


def optional_boolean(raw: Mapping[str, Any], key: str, path: str, default: bool = False) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    if not guards.is_boolean(value):
        raise InvalidResponseError(_join(path, key), "expected a boolean")
    return value


def parse_enum(
    raw: Mapping[str, Any],
    key: str,
    allowed: Collection[str],
    path: str,
    default: Any = _MISSING,
) -> str:
    """Valor de enum exacto (case-sensitive). Ausente -> `default` si se indicó."""

    value = raw.get(key)
    if value is None and default is not _MISSING:
        return default
    if not guards.is_one_of(value, allowed):
        raise InvalidResponseError(_join(path, key), f"expected one of {sorted(allowed)}")
    return value


def parse_location(raw: Any, path: str) -> TaskLocation:
    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")
    return TaskLocation(
        address=require_string(raw, "address", path),
        lat=require_number(raw, "lat", path),
        lng=require_number(raw, "lng", path),
        distance=optional_number(raw, "distance", path, default=None),
    )


def parse_task(raw: Any, path: str = "task") -> Task:
    """Valida una tarea completa.

    `id` y `title` son la identidad y deben ser no vacíos; el resto sólo debe
    tener el tipo primitivo correcto.
    """

    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")

    price_amount = require_number(raw, "priceAmount", path)
    if price_amount < 0:
        raise InvalidResponseError(_join(path, "priceAmount"), "expected a non-negative number")

    currency = raw.get("priceCurrency", "USD")
    if not guards.is_non_empty_string(currency):
        raise InvalidResponseError(_join(path, "priceCurrency"), "expected a non-empty string")

    return Task(
        id=require_non_empty_string(raw, "id", path),
        title=require_non_empty_string(raw, "title", path),
        description=require_string(raw, "description", path),
        status=parse_enum(raw, "status", TASK_STATUSES, path),
        price_amount=price_amount,
        price_currency=currency,
        estimated_duration=require_number(raw, "estimatedDuration", path),
        required_trust_tier=require_number(raw, "requiredTrustTier", path),
        location=parse_location(raw.get("location"), _join(path, "location")),
        category=require_string(raw, "category", path),
        created_at=require_string(raw, "createdAt", path),
        expires_at=optional_string(raw, "expiresAt", path),
    )


def parse_optional_task(raw: Any, path: str) -> Task | None:
    if raw is None:
        return None
    return parse_task(raw, path)


def parse_user_summary(raw: Any, path: str = "user") -> UserSummary:
    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")
    return UserSummary(
        xp=require_number(raw, "xp", path),
        level=require_number(raw, "level", path),
        trust_tier=require_number(raw, "trustTier", path),
    )


def parse_poster(raw: Any, path: str = "poster") -> PosterSummary:
    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")
    return PosterSummary(
        name=require_non_empty_string(raw, "name", path),
        rating=require_number(raw, "rating", path),
        task_count=require_number(raw, "taskCount", path),
    )


def parse_destination(raw: Any, path: str = "destination") -> Destination:
    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")
    return Destination(
        lat=require_number(raw, "lat", path),
        lng=require_number(raw, "lng", path),
        address=require_string(raw, "address", path),
    )


def parse_system_status(raw: Any) -> SystemStatus | None:
    """Pass-through: sólo se comprueba presencia y forma; si no encaja -> None."""

    if not guards.is_object(raw):
        return None
    tone = raw.get("tone")
    message = raw.get("message")
    if not guards.is_one_of(tone, SYSTEM_STATUS_TONES) or not guards.is_string(message):
        return None
    return SystemStatus(tone=tone, message=message)


def parse_xp_entry(raw: Any, path: str) -> XPEntry:
    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")
    return XPEntry(
        id=require_non_empty_string(raw, "id", path),
        amount=require_number(raw, "amount", path),
        source=require_string(raw, "source", path),
        earned_at=require_string(raw, "earnedAt", path),
        task_title=optional_string(raw, "taskTitle", path),
    )


def parse_breakdown_item(raw: Any, path: str) -> XPBreakdownItem:
    if not guards.is_object(raw):
        raise InvalidResponseError(path, "missing or not an object")
    return XPBreakdownItem(
        source=require_string(raw, "source", path),
        amount=require_number(raw, "amount", path),
    )
