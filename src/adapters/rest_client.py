"""Fachada REST sobre el cliente httpx con pipeline.

Responsabilidad:
- Codificar el cuerpo saliente y enviar el request.
- Convertir respuestas 2xx al tipo pedido (o texto crudo si el tipo es `str`).
- Traducir respuestas no-2xx a `ApiStatusError`.

Los errores de transporte de httpx se propagan sin envolver.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.converters import BodyConverter
from core.errors import ApiStatusError, NoConverterError


class RestClient:
    """Cliente síncrono.

    Example:
        >>> with RestClient(build_client(settings)) as api:
        ...     page = api.get("user/repos", dict[str, Any], params={"page": 2})
        ...     page["next"], page["items"]
    """

    def __init__(self, client: httpx.Client, converter: BodyConverter | None = None) -> None:
        self._client = client
        self._converter = converter or BodyConverter()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        response_type: Any = Any,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        content = self._converter.encode_request(body) if body is not None else None
        response = self._client.request(method, path, params=params, content=content)
        return _convert(self._converter, response, response_type)

    def get(self, path: str, response_type: Any = Any, *, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, response_type, params=params)


class AsyncRestClient:
    """Cliente asíncrono; misma semántica que `RestClient`."""

    def __init__(self, client: httpx.AsyncClient, converter: BodyConverter | None = None) -> None:
        self._client = client
        self._converter = converter or BodyConverter()

    async def __aenter__(self) -> AsyncRestClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        response_type: Any = Any,
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        content = self._converter.encode_request(body) if body is not None else None
        response = await self._client.request(method, path, params=params, content=content)
        await response.aread()
        return _convert(self._converter, response, response_type)

    async def get(self, path: str, response_type: Any = Any, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, response_type, params=params)


def _convert(converter: BodyConverter, response: httpx.Response, response_type: Any) -> Any:
    if not response.is_success:
        raise ApiStatusError(response.status_code, str(response.url), response.text)

    convert = converter.select_response_converter(response_type)
    if convert is None:
        raise NoConverterError(response_type)
    return convert(response)
