"""Guards: predicados puros sobre JSON crudo.

Reglas:
- Funciones totales, sin efectos ni excepciones.
- Sin coerción implícita: `"5"` no es un número y `True` tampoco.
"""

from __future__ import annotations

import math
from collections.abc import Collection, Mapping
from typing import Any


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def is_nullable_string(value: Any) -> bool:
    return value is None or isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    # bool es subclase de int en Python.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Entero JSON sin representación como float: se trata como no finito.
        return False


def is_nullable_finite_number(value: Any) -> bool:
    return value is None or is_finite_number(value)


def is_one_of(value: Any, allowed: Collection[str]) -> bool:
    """Pertenencia exacta (case-sensitive) a un enum de strings."""

    return isinstance(value, str) and value in allowed


def to_array_or_empty(value: Any) -> list[Any]:
    """Devuelve `value` si es una lista; cualquier otra cosa se degrada a `[]`."""

    if isinstance(value, list):
        return value
    return []
