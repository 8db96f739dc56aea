"""Cliente Python para el API de aprovisionamiento de Blue Box.

El logger (loguru) del paquete está deshabilitado por defecto; las
aplicaciones lo activan con `logger.enable("bluebox")`.
"""

from loguru import logger

from bluebox.client import BlueBoxClient
from bluebox.core.config import DEFAULT_BASE_URL, ApiSettings
from bluebox.core.domain.models import Block, BlockParams, Template, TemplateCreationStatus
from bluebox.core.errors import (
    BlueBoxError,
    ConfigurationError,
    ParamsValidationError,
    RequestConstructionError,
    UnexpectedStatusError,
)

logger.disable("bluebox")

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiSettings",
    "Block",
    "BlockParams",
    "BlueBoxClient",
    "BlueBoxError",
    "ConfigurationError",
    "ParamsValidationError",
    "RequestConstructionError",
    "Template",
    "TemplateCreationStatus",
    "UnexpectedStatusError",
]
