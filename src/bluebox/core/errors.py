"""Errores del cliente.

Los errores de red (`httpx.TransportError`) y de decodificación
(`pydantic.ValidationError`) no se envuelven: llegan tal cual al llamador.
"""

from __future__ import annotations


class BlueBoxError(Exception):
    """Base de todos los errores propios del cliente."""


class ParamsValidationError(BlueBoxError, ValueError):
    """Parámetros de creación inválidos. Se lanza antes de tocar la red."""


class RequestConstructionError(BlueBoxError, ValueError):
    """La ruta lógica no pudo resolverse en una URL válida."""


class ConfigurationError(BlueBoxError, ValueError):
    """Falta configuración obligatoria (p.ej. credenciales)."""


class UnexpectedStatusError(BlueBoxError):
    """Respuesta con status fuera de [200, 300).

    El body de la respuesta no se interpreta.
    """

    def __init__(self, status_code: int, *, method: str | None = None, url: str | None = None) -> None:
        self.status_code = status_code
        self.method = method
        self.url = url
        super().__init__(f"Expected status 2xx, got {status_code}")
