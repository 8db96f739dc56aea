"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los adaptadores.
- El host del API deja de ser un valor global fijo: es un campo con default.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://boxpanel.bluebox.net"


class ApiSettings(BaseSettings):
    """Configuración central del cliente Blue Box.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env).
    - Un único contrato de configuración para transporte y servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="BLUEBOX_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base del API (esquema + host). Las rutas se resuelven como `api/<ruta>.json`.",
    )
    customer_id: str | None = Field(
        default=None,
        description="Customer id usado como usuario de HTTP Basic Auth.",
    )
    api_key: str | None = Field(
        default=None,
        description="API key usada como contraseña de HTTP Basic Auth.",
    )
    user_agent: str = Field(
        default="bluebox-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = default de httpx.",
    )
