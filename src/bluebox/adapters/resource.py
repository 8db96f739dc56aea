"""Endpoint genérico de recursos REST.

Blocks y Templates solo difieren en el prefijo de ruta y en los tipos; esta
clase concentra la plomería compartida (rutas, verbos, decodificación) para
que cada servicio solo declare su forma.
"""

from __future__ import annotations

from typing import Generic, TypeVar
from urllib.parse import quote

from bluebox.adapters.http_client import ApiTransport

ModelT = TypeVar("ModelT")
ResultT = TypeVar("ResultT")


class ResourceEndpoint(Generic[ModelT]):
    """Operaciones List/Get/Post/Destroy sobre `prefix` decodificando a `model`."""

    def __init__(self, transport: ApiTransport, prefix: str, model: type[ModelT]) -> None:
        self._transport = transport
        self.prefix = prefix
        self.model = model

    def member_path(self, resource_id: str) -> str:
        # El id es un único segmento de ruta.
        return f"{self.prefix}/{quote(resource_id, safe='')}"

    def list(self) -> list[ModelT]:
        request = self._transport.build_request("GET", self.prefix)
        return self._transport.execute(request, list[self.model])

    def get(self, resource_id: str) -> ModelT:
        request = self._transport.build_request("GET", self.member_path(resource_id))
        return self._transport.execute(request, self.model)

    def post(self, data: dict[str, str], result_type: type[ResultT]) -> ResultT:
        request = self._transport.build_request("POST", self.prefix, data=data)
        return self._transport.execute(request, result_type)

    def destroy(self, resource_id: str) -> None:
        request = self._transport.build_request("DELETE", self.member_path(resource_id))
        self._transport.execute(request)
