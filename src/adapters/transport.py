"""Transportes httpx que componen el pipeline de interceptores.

Por qué un transporte y no event hooks:
- Los hooks de httpx no pueden sustituir el request ni la respuesta.
- Un transporte envuelve al primitivo de ejecución (HTTPTransport, MockTransport...)
  y deja TLS, pooling y reintentos a httpx.
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Sequence

import httpx

from core.interfaces.stages import Exchange, RequestStage, ResponseStage


def _prepare(request: httpx.Request, stages: Sequence[RequestStage]) -> httpx.Request:
    for stage in stages:
        request = stage.on_request(request)
    return request


class PipelineTransport(httpx.BaseTransport):
    """Transporte síncrono: etapas de salida, transporte interno, etapas de entrada."""

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        *,
        request_stages: Sequence[RequestStage] = (),
        response_stages: Sequence[ResponseStage] = (),
    ) -> None:
        self._transport = transport or httpx.HTTPTransport()
        self.request_stages = list(request_stages)
        self.response_stages = list(response_stages)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        prepared = _prepare(request, self.request_stages)
        started_at = time.perf_counter()
        response = self._transport.handle_request(prepared)

        exchange = Exchange(
            original_request=request,
            request=prepared,
            response=response,
            started_at=started_at,
        )
        for stage in self.response_stages:
            exchange = replace(exchange, response=stage.on_response(exchange))
        return exchange.response

    def close(self) -> None:
        self._transport.close()


class AsyncPipelineTransport(httpx.AsyncBaseTransport):
    """Gemelo asíncrono de `PipelineTransport`."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        *,
        request_stages: Sequence[RequestStage] = (),
        response_stages: Sequence[ResponseStage] = (),
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self.request_stages = list(request_stages)
        self.response_stages = list(response_stages)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        prepared = _prepare(request, self.request_stages)
        started_at = time.perf_counter()
        response = await self._transport.handle_async_request(prepared)

        exchange = Exchange(
            original_request=request,
            request=prepared,
            response=response,
            started_at=started_at,
        )
        for stage in self.response_stages:
            exchange = replace(exchange, response=await stage.aon_response(exchange))
        return exchange.response

    async def aclose(self) -> None:
        await self._transport.aclose()
