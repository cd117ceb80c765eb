"""Wrapper de httpx (transporte).

Por qué un wrapper:
- Estandariza timeouts, headers y el mapeo de fallos a una taxonomía cerrada.
- Nunca lanza: todo termina en un `NetworkResult` etiquetado.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.

Sin reintentos ni logging: eso es responsabilidad de quien llama.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import NetworkErrorCode, NetworkResult, error_from_status


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults JSON.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las fuentes se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def _send(
    client: httpx.AsyncClient,
    url: str,
    *,
    method: str,
    body: Any,
    headers: dict[str, str] | None,
    timeout_seconds: float,
) -> NetworkResult:
    request_headers = dict(headers or {})
    try:
        content = None
        if body is not None:
            content = json.dumps(body).encode("utf-8")
            request_headers.setdefault("Content-Type", "application/json")
    except (TypeError, ValueError) as exc:
        return NetworkResult.failure(
            NetworkErrorCode.NETWORK_ERROR,
            f"Request body is not JSON serializable: {exc}",
        )

    try:
        response = await asyncio.wait_for(
            client.request(method, url, content=content, headers=request_headers or None),
            timeout=timeout_seconds,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException):
        return NetworkResult.failure(
            NetworkErrorCode.TIMEOUT,
            f"Request timed out after {int(timeout_seconds * 1000)}ms",
        )
    except Exception as exc:
        # Offline, DNS, TLS, conexión rechazada...
        return NetworkResult.failure(
            NetworkErrorCode.NETWORK_ERROR,
            str(exc) or "Network request failed",
        )

    if not response.is_success:
        return NetworkResult(ok=False, error=error_from_status(response.status_code))

    try:
        data = response.json()
    except ValueError:
        return NetworkResult.failure(
            NetworkErrorCode.INVALID_JSON,
            "Failed to parse response as JSON",
            status_code=response.status_code,
        )

    return NetworkResult.success(data)


async def request(
    url: str,
    *,
    method: str = "GET",
    body: Any = None,
    headers: dict[str, str] | None = None,
    timeout_seconds: float | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> NetworkResult:
    """Hace una única petición y parsea JSON.

    - `timeout_seconds` por defecto: `settings.http_timeout_seconds`.
    - `headers` se fusionan sobre los del cliente sólo para esta petición.
    - Si se pasa `client` no se cierra; si no, se crea y cierra uno por llamada.
    """

    settings = settings or AppSettings()
    timeout = timeout_seconds if timeout_seconds is not None else settings.http_timeout_seconds

    if client is not None:
        return await _send(client, url, method=method, body=body, headers=headers, timeout_seconds=timeout)

    async with build_async_client(settings) as own_client:
        return await _send(own_client, url, method=method, body=body, headers=headers, timeout_seconds=timeout)


async def get(url: str, **kwargs: Any) -> NetworkResult:
    return await request(url, method="GET", **kwargs)


async def post(url: str, body: Any = None, **kwargs: Any) -> NetworkResult:
    return await request(url, method="POST", body=body, **kwargs)
