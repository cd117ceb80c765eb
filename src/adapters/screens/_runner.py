"""Ciclo común fetch -> validar -> proyectar de los adaptadores de pantalla.

Reglas:
- Un único punto de suspensión: el `await` del fetch. Todo lo demás es
  síncrono.
- Nunca lanza: cada fallo termina en `AdapterResult(ERROR, stub)` y se
  registra exactamente una vez.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError

from core.domain.errors import ErrorCode, InvalidResponseError, NetworkResult, to_observability_error_code
from core.domain.models import AdapterResult, AdapterState, PropsT
from core.interfaces.error_logger import ErrorLogger

Projector = Callable[[Any], tuple[AdapterState, Any]]


async def run_adapter(
    *,
    screen: str,
    adapter: str,
    endpoint: str,
    ids: dict[str, str],
    fetch: Awaitable[NetworkResult],
    project: Projector,
    stub: PropsT,
    log_error: ErrorLogger,
) -> AdapterResult[PropsT]:
    result = await fetch

    error = result.error
    if error is not None:
        log_error(
            "network",
            to_observability_error_code(error.code).value,
            error.message,
            meta={"endpoint": endpoint, **ids, "statusCode": error.status_code},
        )
        return AdapterResult(state=AdapterState.ERROR, props=stub)

    try:
        state, props = project(result.data)
    except (InvalidResponseError, ValidationError) as exc:
        log_error(
            "adapter",
            ErrorCode.INVALID_RESPONSE.value,
            str(exc),
            screen=screen,
            adapter=adapter,
            meta={"endpoint": endpoint, **ids, "field": getattr(exc, "path", "<model>")},
        )
        return AdapterResult(state=AdapterState.ERROR, props=stub)

    return AdapterResult(state=state, props=props)
