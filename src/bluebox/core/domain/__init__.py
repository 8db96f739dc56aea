"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP: solo blocks, templates y sus parámetros.
"""

from bluebox.core.domain.models import Block, BlockParams, Template, TemplateCreationStatus

__all__ = [
    "Block",
    "BlockParams",
    "Template",
    "TemplateCreationStatus",
]
