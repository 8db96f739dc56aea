"""Fachada del cliente Blue Box.

Une configuración, transporte y servicios en un solo objeto:

    with BlueBoxClient("customer-id", "api-key") as api:
        for block in api.blocks.list():
            ...

El cliente no guarda estado mutable por llamada; puede reutilizarse para
llamadas secuenciales.
"""

from __future__ import annotations

import httpx

from bluebox.adapters.blocks import BlocksService
from bluebox.adapters.http_client import ApiTransport, build_client
from bluebox.adapters.templates import TemplatesService
from bluebox.core.config import ApiSettings
from bluebox.core.errors import ConfigurationError, RequestConstructionError


class BlueBoxClient:
    """Punto de entrada: expone `blocks` y `templates`."""

    def __init__(
        self,
        customer_id: str,
        api_key: str,
        *,
        settings: ApiSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or ApiSettings()
        # Un client inyectado pertenece al llamador: no lo cerramos.
        self._owns_http_client = http_client is None
        self._http_client = http_client or build_client(self.settings)

        try:
            self.transport = ApiTransport(
                customer_id=customer_id,
                api_key=api_key,
                client=self._http_client,
                base_url=self.settings.base_url,
            )
        except RequestConstructionError:
            self.close()
            raise
        self.blocks = BlocksService(self.transport)
        self.templates = TemplatesService(self.transport)

    @classmethod
    def from_settings(
        cls,
        settings: ApiSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> "BlueBoxClient":
        """Construye el cliente con las credenciales de `ApiSettings` (env / .env)."""

        settings = settings or ApiSettings()
        if not settings.customer_id or not settings.api_key:
            raise ConfigurationError("BLUEBOX_CUSTOMER_ID and BLUEBOX_API_KEY must both be set")
        return cls(settings.customer_id, settings.api_key, settings=settings, http_client=http_client)

    def close(self) -> None:
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "BlueBoxClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
