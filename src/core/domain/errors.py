"""Taxonomía de errores del Core.

Por qué aquí:
- El transporte y los adaptadores nunca lanzan: devuelven resultados
  etiquetados. Este módulo define esas etiquetas y su traducción a códigos de
  observabilidad.
- `InvalidResponseError` es la única excepción del dominio y no cruza el borde
  validador -> adaptador.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NetworkErrorCode(str, Enum):
    """Resultado fallido del transporte (cerrado)."""

    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT = "TIMEOUT"
    SERVER_ERROR = "SERVER_ERROR"
    INVALID_JSON = "INVALID_JSON"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"


class ErrorCode(str, Enum):
    """Códigos de error compartidos entre logging y UI."""

    # Network & Server
    NETWORK_ERROR = "NETWORK_ERROR"
    SERVER_ERROR = "SERVER_ERROR"

    # Resource
    NOT_FOUND = "NOT_FOUND"

    # Auth & Permission
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

    # Eligibility
    ELIGIBILITY_FAILED = "ELIGIBILITY_FAILED"
    TRUST_TIER_REQUIRED = "TRUST_TIER_REQUIRED"

    # Task State
    TASK_EXPIRED = "TASK_EXPIRED"
    TASK_TAKEN = "TASK_TAKEN"

    # System
    MAINTENANCE = "MAINTENANCE"

    # Adapter-specific
    INVALID_RESPONSE = "INVALID_RESPONSE"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"


class NetworkError(BaseModel):
    """Error normalizado del transporte."""

    model_config = ConfigDict(frozen=True)

    code: NetworkErrorCode = Field(..., description="Código de la taxonomía cerrada.")
    message: str = Field(..., description="Mensaje diagnóstico (no se muestra al usuario).")
    status_code: int | None = Field(
        default=None,
        description="Status HTTP si la respuesta llegó a existir.",
    )


@dataclass(frozen=True)
class NetworkResult:
    """Resultado etiquetado del transporte: `ok` con `data` o con `error`."""

    ok: bool
    data: Any = None
    error: NetworkError | None = None

    @classmethod
    def success(cls, data: Any) -> "NetworkResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(
        cls,
        code: NetworkErrorCode,
        message: str,
        status_code: int | None = None,
    ) -> "NetworkResult":
        return cls(ok=False, error=NetworkError(code=code, message=message, status_code=status_code))


def error_from_status(status: int, message: str | None = None) -> NetworkError:
    """Crea el `NetworkError` correspondiente a un status HTTP no-2xx."""

    if status == 401:
        return NetworkError(code=NetworkErrorCode.UNAUTHORIZED, message=message or "Unauthorized", status_code=status)
    if status == 403:
        return NetworkError(code=NetworkErrorCode.FORBIDDEN, message=message or "Forbidden", status_code=status)
    if status == 404:
        return NetworkError(code=NetworkErrorCode.NOT_FOUND, message=message or "Not found", status_code=status)
    if status >= 500:
        return NetworkError(code=NetworkErrorCode.SERVER_ERROR, message=message or "Server error", status_code=status)
    return NetworkError(code=NetworkErrorCode.SERVER_ERROR, message=message or f"HTTP {status}", status_code=status)


_OBSERVABILITY_CODES: dict[NetworkErrorCode, ErrorCode] = {
    NetworkErrorCode.NETWORK_ERROR: ErrorCode.NETWORK_ERROR,
    NetworkErrorCode.TIMEOUT: ErrorCode.NETWORK_ERROR,
    NetworkErrorCode.SERVER_ERROR: ErrorCode.SERVER_ERROR,
    NetworkErrorCode.INVALID_JSON: ErrorCode.INVALID_RESPONSE,
    NetworkErrorCode.UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    NetworkErrorCode.FORBIDDEN: ErrorCode.FORBIDDEN,
    NetworkErrorCode.NOT_FOUND: ErrorCode.NOT_FOUND,
}


def to_observability_error_code(code: NetworkErrorCode) -> ErrorCode:
    """Traduce un código de transporte al código usado en logs."""

    return _OBSERVABILITY_CODES[code]


class InvalidResponseError(ValueError):
    """Señal de validación: el payload se parseó pero no cumple el contrato.

    `path` identifica el campo que falló (p.ej. `task.location.lat`).
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class ErrorConfig:
    """Cómo debe presentarse un error (tono, recuperable, acción sugerida)."""

    tone: str
    recoverable: bool
    action: str
    navigate_to: str | None = None


def map_error(code: ErrorCode | str) -> ErrorConfig:
    """Mapea un código de error a su configuración de presentación."""

    value = code.value if isinstance(code, ErrorCode) else code

    if value in (ErrorCode.NETWORK_ERROR.value, ErrorCode.SERVER_ERROR.value):
        return ErrorConfig(tone="danger", recoverable=True, action="retry")
    if value == ErrorCode.NOT_FOUND.value:
        return ErrorConfig(tone="danger", recoverable=False, action="back")
    if value == ErrorCode.UNAUTHORIZED.value:
        return ErrorConfig(tone="danger", recoverable=False, action="navigate", navigate_to="Login")
    if value == ErrorCode.FORBIDDEN.value:
        return ErrorConfig(tone="danger", recoverable=False, action="navigate", navigate_to="Eligibility")
    if value in (ErrorCode.ELIGIBILITY_FAILED.value, ErrorCode.TRUST_TIER_REQUIRED.value):
        return ErrorConfig(tone="warning", recoverable=False, action="navigate", navigate_to="TrustLadder")
    if value in (ErrorCode.TASK_EXPIRED.value, ErrorCode.TASK_TAKEN.value):
        return ErrorConfig(tone="info", recoverable=False, action="back")
    if value == ErrorCode.MAINTENANCE.value:
        return ErrorConfig(tone="warning", recoverable=False, action="none")
    if value in (ErrorCode.INVALID_RESPONSE.value, ErrorCode.MISSING_REQUIRED_FIELD.value):
        return ErrorConfig(tone="danger", recoverable=True, action="retry")
    return ErrorConfig(tone="danger", recoverable=False, action="none")
