"""Servicio de blocks (`/blocks`)."""

from __future__ import annotations

from loguru import logger

from bluebox.adapters.http_client import ApiTransport
from bluebox.adapters.resource import ResourceEndpoint
from bluebox.core.domain.models import Block, BlockParams
from bluebox.core.interfaces.resource import ResourceService


class BlocksService(ResourceService[Block, BlockParams, Block]):
    """List/Get/Create/Destroy de blocks."""

    path = "/blocks"

    def __init__(self, transport: ApiTransport) -> None:
        self._endpoint = ResourceEndpoint(transport, self.path, Block)

    def list(self) -> list[Block]:
        return self._endpoint.list()

    def get(self, block_id: str) -> Block:
        return self._endpoint.get(block_id)

    def create(self, params: BlockParams) -> Block:
        """Valida `params` (sin tocar la red si fallan) y crea el block."""

        params.ensure_valid()
        logger.info("Creating block from template {} (product {})", params.template, params.product)
        return self._endpoint.post(params.to_form(), Block)

    def destroy(self, block_id: str) -> None:
        logger.info("Destroying block {}", block_id)
        self._endpoint.destroy(block_id)
