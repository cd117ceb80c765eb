"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El modo de datos (mock/live) se lee una sola vez y se pasa explícitamente a
  quien construye las fuentes de datos; los adaptadores nunca lo consultan.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataSourceMode(str, Enum):
    """Origen de los datos para un endpoint."""

    MOCK = "mock"
    LIVE = "live"


_APP_DIR = "hustlexp"
_USER_ENV_HEADER = "# HustleXP user config (.env)"


def get_user_config_dir() -> Path:
    """Carpeta de configuración del usuario según la plataforma."""

    home = Path.home()
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or home) / _APP_DIR
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / _APP_DIR
    return Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config") / _APP_DIR


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _read_env_file(path: Path) -> dict[str, str]:
    """Lee pares KEY=VALUE; comentarios y líneas sin '=' se descartan."""

    if not path.is_file():
        return {}
    pairs: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#") or not key.strip():
            continue
        pairs[key.strip()] = value.strip().strip("'\"")
    return pairs


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Fusiona `values` en el .env del usuario (claves ordenadas) y devuelve la ruta."""

    target = env_path or get_user_env_file()
    merged = _read_env_file(target)
    merged.update((key, value) for key, value in values.items() if value is not None)

    target.parent.mkdir(parents=True, exist_ok=True)
    body = [_USER_ENV_HEADER, *(f"{key}={merged[key]}" for key in sorted(merged))]
    target.write_text("\n".join(body) + "\n", encoding="utf-8")
    return target


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI, transporte y fuentes de datos.
    """

    model_config = SettingsConfigDict(
        env_prefix="HUSTLEXP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.hustlexp.com",
        min_length=8,
        description="Base URL del backend (sin barra final).",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="hustlexp-data/0.1",
        min_length=1,
        description="User-Agent para peticiones al backend.",
    )

    data_source: DataSourceMode = Field(
        default=DataSourceMode.MOCK,
        description="Modo global: fixtures estáticos (mock) o backend real (live).",
    )
    endpoint_overrides: dict[str, DataSourceMode] = Field(
        default_factory=dict,
        description="Modo por endpoint (plantilla, p.ej. '/api/tasks/:taskId'); tiene prioridad sobre el global.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel del logger 'hustlexp'.",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON (una línea por evento).",
    )
