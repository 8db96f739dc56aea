"""Adaptadores HTTP del API.

Por qué un paquete:
- Agrupa el transporte (httpx) y los servicios concretos por recurso.
- Cada servicio implementa `bluebox.core.interfaces.ResourceService`.
"""

from bluebox.adapters.blocks import BlocksService
from bluebox.adapters.http_client import ApiTransport, build_client
from bluebox.adapters.templates import TemplatesService

__all__ = [
    "ApiTransport",
    "BlocksService",
    "TemplatesService",
    "build_client",
]
