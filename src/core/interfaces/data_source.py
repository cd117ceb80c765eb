"""Contratos de fuentes de datos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los adaptadores de pantalla reciben la fuente por inyección; los tests pasan
  una implementación falsa en vez de parchear módulos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.errors import NetworkResult


@runtime_checkable
class DataSource(Protocol):
    """Fuente del payload crudo de cada pantalla.

    Reglas de diseño:
    - Todos los métodos son asíncronos (típicamente HTTP).
    - Nunca lanzan: devuelven `NetworkResult` etiquetado.
    """

    async def fetch_hustler_home(self) -> NetworkResult: ...

    async def fetch_task_feed(self) -> NetworkResult: ...

    async def fetch_task_detail(self, task_id: str) -> NetworkResult: ...

    async def fetch_task_progress(self, task_id: str) -> NetworkResult: ...

    async def fetch_task_completion(self, task_id: str) -> NetworkResult: ...

    async def fetch_xp(self) -> NetworkResult: ...
