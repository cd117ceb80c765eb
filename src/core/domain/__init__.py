"""Modelos, guards y validadores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y las
  reglas que convierten JSON crudo en ellas.
- El dominio no conoce HTTP, CLI, ni fuentes de datos: solo el contrato.
"""
