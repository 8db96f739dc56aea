"""Transporte HTTP sobre httpx.

Por qué un wrapper:
- Estandariza headers, autenticación (HTTP Basic) y la convención de rutas
  `api/<ruta>.json` del API.
- Un único punto donde el status HTTP se traduce a éxito/error y el JSON a
  modelos tipados.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

import httpx
from loguru import logger
from pydantic import TypeAdapter

from bluebox.core.config import ApiSettings
from bluebox.core.errors import RequestConstructionError, UnexpectedStatusError

T = TypeVar("T")

ACCEPT = "application/json; charset=utf-8"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
_FORM_METHODS = frozenset({"POST", "PUT"})


def build_client(settings: ApiSettings | None = None) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults del cliente.

    Solo se fija timeout si la configuración lo pide; en otro caso rige el
    default de httpx.
    """

    settings = settings or ApiSettings()
    kwargs: dict[str, Any] = {
        "headers": {"User-Agent": settings.user_agent},
    }
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.Client(**kwargs)


class ApiTransport:
    """Construye y ejecuta requests autenticados contra el API."""

    def __init__(
        self,
        *,
        customer_id: str,
        api_key: str,
        client: httpx.Client,
        base_url: str,
    ) -> None:
        self._client = client
        self._auth = httpx.BasicAuth(customer_id, api_key)
        try:
            self._base_url = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(f"Invalid base URL {base_url!r}: {exc}") from exc
        if not self._base_url.is_absolute_url:
            raise RequestConstructionError(f"Base URL {base_url!r} must include scheme and host")

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def url_for_path(self, path: str) -> httpx.URL:
        """`/blocks/abc` -> `<base>/api/blocks/abc.json`."""

        try:
            return self._base_url.join(f"api{path}.json")
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(f"Cannot build URL for path {path!r}: {exc}") from exc

    def build_request(
        self,
        method: str,
        path: str,
        data: dict[str, str] | None = None,
    ) -> httpx.Request:
        method = method.upper()
        url = self.url_for_path(path)

        headers = {"Accept": ACCEPT}
        if method in _FORM_METHODS:
            headers["Content-Type"] = FORM_CONTENT_TYPE

        try:
            request = self._client.build_request(method, url, data=data or None, headers=headers)
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(f"Cannot build request for path {path!r}: {exc}") from exc

        # El header Authorization ya calculado por httpx.BasicAuth; se fija al construir,
        # no al enviar.
        request.headers["Authorization"] = self._auth._auth_header
        return request

    @overload
    def execute(self, request: httpx.Request, result_type: None = None) -> None: ...

    @overload
    def execute(self, request: httpx.Request, result_type: type[T]) -> T: ...

    def execute(self, request: httpx.Request, result_type: Any = None) -> Any:
        """Envía el request (un solo intento) y decodifica la respuesta.

        - Errores de red: `httpx.TransportError`, sin envolver.
        - Status fuera de [200, 300): `UnexpectedStatusError`.
        - JSON inválido o con forma inesperada: `pydantic.ValidationError`.
        """

        logger.debug("{} {}", request.method, request.url)
        response = self._client.send(request)
        try:
            status = response.status_code
            logger.debug("{} {} -> {}", request.method, request.url, status)
            if status < 200 or status >= 300:
                logger.warning("Unexpected status {} for {} {}", status, request.method, request.url)
                raise UnexpectedStatusError(status, method=request.method, url=str(request.url))

            if result_type is None:
                return None
            return TypeAdapter(result_type).validate_json(response.content)
        finally:
            response.close()
