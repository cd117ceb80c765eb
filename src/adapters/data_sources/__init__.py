"""Fuentes de datos (implementaciones de `core.interfaces.data_source.DataSource`).

Por qué un paquete:
- `LiveDataSource` (HTTP), `FixtureDataSource` (estático) y `RoutedDataSource`
  (elige por endpoint) son intercambiables para los adaptadores de pantalla.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from adapters.data_sources.fixture import FixtureDataSource
from adapters.data_sources.live import LiveDataSource
from adapters.data_sources.routed import RoutedDataSource
from core.config import AppSettings
from core.interfaces.data_source import DataSource
from core.services.source_selector import SourceSelector


def build_data_source(
    settings: AppSettings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    fixtures: Mapping[str, Any] | None = None,
) -> DataSource:
    """Construye la fuente de datos según el modo configurado."""

    settings = settings or AppSettings()
    return RoutedDataSource(
        SourceSelector.from_settings(settings),
        live=LiveDataSource(settings, client=client),
        fixtures=FixtureDataSource(fixtures),
    )


__all__ = [
    "FixtureDataSource",
    "LiveDataSource",
    "RoutedDataSource",
    "build_data_source",
]
