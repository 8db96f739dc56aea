"""Contrato de servicios de recursos.

Por qué Protocol:
- Blocks y Templates comparten la forma List/Get/Create/Destroy y solo
  difieren en tipos y rutas.
- Contrato estructural (duck typing) sin herencia rígida; permite sustituir
  servicios por dobles en tests.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

EntityT = TypeVar("EntityT", covariant=True)
CreatedT = TypeVar("CreatedT", covariant=True)
CreateArgT = TypeVar("CreateArgT", contravariant=True)


@runtime_checkable
class ResourceService(Protocol[EntityT, CreateArgT, CreatedT]):
    """Contrato mínimo de un servicio de recursos remotos.

    Reglas de diseño:
    - Cada método hace exactamente un round trip HTTP bloqueante.
    - `create` puede devolver un tipo distinto a la entidad (templates
      devuelven un estado encolado).
    """

    def list(self) -> Sequence[EntityT]:
        ...

    def get(self, resource_id: str) -> EntityT:
        ...

    def create(self, params: CreateArgT) -> CreatedT:
        ...

    def destroy(self, resource_id: str) -> None:
        ...
