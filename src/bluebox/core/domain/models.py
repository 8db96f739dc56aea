"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Decodifica y valida las respuestas JSON del API en un solo paso.
- Los modelos son inmutables (`frozen`): solo se construyen a partir de una
  respuesta del servidor, o por el llamador en el caso de `BlockParams`.

Nota:
- Los campos de estado (`status`, `text`, `public`) se mantienen como texto o
  booleanos libres; el API puede devolver valores que no conocemos.
- Las respuestas se validan en modo estricto: un tipo que no coincide es un
  error de decodificación, no una conversión silenciosa.
"""

from __future__ import annotations

from typing import Any

from pydantic import AwareDatetime, BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from bluebox.core.errors import ParamsValidationError


class Block(BaseModel):
    """Un block: instancia de cómputo virtual aprovisionada bajo demanda."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: str = Field(
        ...,
        description="Identificador (uuid) del block.",
    )
    hostname: str = Field(
        default="",
        description="Hostname asignado al block.",
    )
    ips: list[str] = Field(
        default_factory=list,
        description="Direcciones IP del block, en el orden devuelto por el API.",
    )
    status: str = Field(
        default="",
        description="Estado libre reportado por el API (p.ej. 'running', 'queued').",
    )

    @field_validator("ips", mode="before")
    @classmethod
    def _flatten_addresses(cls, value: Any) -> Any:
        # En el wire cada IP llega como {"address": "..."}.
        if not isinstance(value, list):
            return value
        out: list[Any] = []
        for item in value:
            if isinstance(item, dict) and "address" in item:
                out.append(item["address"])
            else:
                out.append(item)
        return out


class BlockParams(BaseModel):
    """Parámetros para crear un block.

    Reglas (ver `ensure_valid`):
    - `product` y `template` son obligatorios.
    - Exactamente uno de `password` / `ssh_public_key`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    product: str = Field(default="", description="Producto (plan) del block.")
    template: str = Field(default="", description="Template desde el que se aprovisiona.")
    password: str = Field(default="", description="Password del usuario inicial.")
    ssh_public_key: str = Field(default="", description="Clave pública SSH del usuario inicial.")
    hostname: str = Field(default="", description="Hostname deseado (opcional).")
    username: str = Field(default="", description="Usuario inicial (opcional).")
    location: str = Field(default="", description="Ubicación/datacenter (opcional).")

    def ensure_valid(self) -> None:
        """Lanza `ParamsValidationError` si los parámetros no son aceptables."""

        if not self.product:
            raise ParamsValidationError('Must specify "product"')
        if not self.template:
            raise ParamsValidationError('Must specify "template"')
        if self.password and self.ssh_public_key:
            raise ParamsValidationError('Only one of "password" and "ssh_public_key" may be specified')
        if not self.password and not self.ssh_public_key:
            raise ParamsValidationError('One of "password" and "ssh_public_key" must be specified')

    def to_form(self) -> dict[str, str]:
        """Campos de formulario; los vacíos se omiten por completo."""

        return {key: value for key, value in self.model_dump().items() if value}


class Template(BaseModel):
    """Template reutilizable para crear blocks."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    id: str = Field(..., description="Identificador del template.")
    description: str = Field(default="", description="Descripción legible.")
    public: bool = Field(default=False, description="True si el template es público.")
    created: AwareDatetime = Field(..., description="Momento de creación; RFC 3339 con zona horaria obligatoria.")


class TemplateCreationStatus(BaseModel):
    """Respuesta a la creación de un template.

    La creación es asíncrona en el servidor: se devuelve un registro de
    estado encolado, no un `Template` terminado.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    status: str = Field(..., description="Identificador de estado.")
    text: str = Field(default="", description="Texto legible del estado (p.ej. 'queued').")
    error: int = Field(default=0, description="Código de error numérico (0 = sin error).")
