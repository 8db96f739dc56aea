"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los servicios concretos.
"""

from bluebox.core.interfaces.resource import ResourceService

__all__ = ["ResourceService"]
