"""Servicio de templates (`/block_templates`).

`create` parte de un block existente y devuelve un `TemplateCreationStatus`:
el servidor encola la creación, no devuelve el template terminado.
"""

from __future__ import annotations

from loguru import logger

from bluebox.adapters.http_client import ApiTransport
from bluebox.adapters.resource import ResourceEndpoint
from bluebox.core.domain.models import Template, TemplateCreationStatus
from bluebox.core.interfaces.resource import ResourceService


class TemplatesService(ResourceService[Template, str, TemplateCreationStatus]):
    """List/Get/Create/Destroy de templates."""

    path = "/block_templates"

    def __init__(self, transport: ApiTransport) -> None:
        self._endpoint = ResourceEndpoint(transport, self.path, Template)

    def list(self) -> list[Template]:
        return self._endpoint.list()

    def get(self, template_id: str) -> Template:
        return self._endpoint.get(template_id)

    def create(self, block_id: str) -> TemplateCreationStatus:
        logger.info("Requesting template from block {}", block_id)
        form = {"id": block_id} if block_id else {}
        return self._endpoint.post(form, TemplateCreationStatus)

    def destroy(self, template_id: str) -> None:
        logger.info("Destroying template {}", template_id)
        self._endpoint.destroy(template_id)
