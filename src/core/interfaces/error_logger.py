"""Contrato del colaborador de logging de errores."""

from __future__ import annotations

from typing import Any, Protocol


class ErrorLogger(Protocol):
    """Firma de `core.observability.log_error`.

    `domain` es 'network' (fallo de transporte) o 'adapter' (fallo de contrato).
    """

    def __call__(
        self,
        domain: str,
        code: str,
        message: str,
        *,
        screen: str | None = None,
        adapter: str | None = None,
        recoverable: bool | None = None,
        action: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> None: ...
