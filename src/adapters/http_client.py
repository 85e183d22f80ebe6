"""Construcción de clientes httpx con el pipeline de interceptores.

Por qué un builder:
- Estandariza base URL, timeouts y el orden de las etapas (auth, negociación,
  paginación, logging) para que todos los clientes se comporten igual.
- Facilita testeo: se puede inyectar un `httpx.MockTransport` como transporte interno.
"""

from __future__ import annotations

import httpx

from adapters.interceptors import (
    AuthInjector,
    ContentNegotiator,
    HttpLoggingInterceptor,
    PaginationRewriter,
)
from adapters.transport import AsyncPipelineTransport, PipelineTransport
from core.config import AppSettings
from core.domain.models import Credentials
from core.interfaces.stages import RequestStage, ResponseStage


def build_stages(
    settings: AppSettings,
    credentials: Credentials,
) -> tuple[list[RequestStage], list[ResponseStage]]:
    """Etapas de salida y de entrada, en orden de ejecución."""

    request_stages: list[RequestStage] = [
        AuthInjector(credentials, user_agent=settings.user_agent),
        ContentNegotiator(settings.media_type),
    ]
    response_stages: list[ResponseStage] = []
    if settings.log_http:
        response_stages.append(HttpLoggingInterceptor())
    response_stages.append(PaginationRewriter())
    return request_stages, response_stages


def build_client(
    settings: AppSettings | None = None,
    credentials: Credentials | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con el pipeline montado.

    `credentials` se comparte por referencia: mutarlo afecta a los siguientes requests.
    """

    settings = settings or AppSettings()
    credentials = credentials if credentials is not None else settings.credentials()
    request_stages, response_stages = build_stages(settings, credentials)
    return httpx.Client(
        base_url=settings.rest_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        transport=PipelineTransport(
            transport,
            request_stages=request_stages,
            response_stages=response_stages,
        ),
    )


def build_async_client(
    settings: AppSettings | None = None,
    credentials: Credentials | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Versión asíncrona de `build_client`."""

    settings = settings or AppSettings()
    credentials = credentials if credentials is not None else settings.credentials()
    request_stages, response_stages = build_stages(settings, credentials)
    return httpx.AsyncClient(
        base_url=settings.rest_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        transport=AsyncPipelineTransport(
            transport,
            request_stages=request_stages,
            response_stages=response_stages,
        ),
    )
