"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.data_source import DataSource
from core.interfaces.error_logger import ErrorLogger

__all__ = ["DataSource", "ErrorLogger"]
