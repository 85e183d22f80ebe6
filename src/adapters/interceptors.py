"""Interceptores del pipeline HTTP (httpx).

Orden de ejecución:
- Salida:  AuthInjector -> ContentNegotiator -> transporte
- Entrada: HttpLoggingInterceptor -> PaginationRewriter -> caller/conversor

Ninguno guarda estado por request; el único estado compartido son las
`Credentials`, que se leen una vez por request.
"""

from __future__ import annotations

import codecs
import logging
import time

import httpx

from core.domain.media_types import GITHUB_V3_JSON, wants_bypass
from core.domain.models import Credentials
from core.interfaces.stages import Exchange
from core.services.envelope import BodyShape, detect_shape, merge_object, wrap_array
from core.services.link_header import parse_link_header

logger = logging.getLogger(__name__)

# Cabeceras que dejan de ser ciertas cuando se reconstruye el cuerpo.
_STALE_BODY_HEADERS = frozenset({"content-length", "content-encoding", "transfer-encoding"})


def rebuild_request(request: httpx.Request, headers: httpx.Headers) -> httpx.Request:
    """Nuevo request con las mismas propiedades y cabeceras distintas."""

    rebuilt = httpx.Request(
        request.method,
        request.url,
        headers=headers,
        stream=request.stream,
        extensions=request.extensions,
    )
    if isinstance(request.stream, httpx.ByteStream):
        rebuilt.read()
    return rebuilt


def rebuild_response(request: httpx.Request, response: httpx.Response, content: bytes) -> httpx.Response:
    """Nueva respuesta, legible desde el principio, con `content` como cuerpo."""

    headers = [
        (name, value)
        for name, value in response.headers.multi_items()
        if name.lower() not in _STALE_BODY_HEADERS
    ]
    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        content=content,
        request=request,
        extensions=response.extensions,
    )


class AuthInjector:
    """Estampa Authorization, X-GitHub-OTP y User-Agent.

    Las credenciales son del caller: pueden cambiar entre requests y cada
    request usa la instantánea vigente al construirse.
    """

    def __init__(self, credentials: Credentials | None = None, *, user_agent: str = "hublink") -> None:
        self.credentials = credentials or Credentials()
        self.user_agent = user_agent

    def on_request(self, request: httpx.Request) -> httpx.Request:
        creds = self.credentials.snapshot()
        headers = httpx.Headers(request.headers)

        if creds.token:
            token = creds.token
            headers["Authorization"] = token if token.startswith("Basic") else f"token {token}"
        if creds.otp and creds.otp.strip():
            headers["X-GitHub-OTP"] = creds.otp.strip()
        if not creds.scraping:
            headers["User-Agent"] = self.user_agent

        return rebuild_request(request, headers)


class ContentNegotiator:
    """Sobrescribe Accept y Content-Type con el media type versionado."""

    def __init__(self, media_type: str = GITHUB_V3_JSON) -> None:
        self.media_type = media_type

    def on_request(self, request: httpx.Request) -> httpx.Request:
        headers = httpx.Headers(request.headers)
        headers["Accept"] = self.media_type
        headers["Content-Type"] = self.media_type
        return rebuild_request(request, headers)


class PaginationRewriter:
    """Pliega la paginación de la cabecera `Link` dentro del cuerpo JSON.

    No se toca la respuesta cuando:
    - el caller pidió un media type HTML/raw (`Accept` del request original);
    - el estado no es 2xx;
    - el cuerpo no es array y no hay relaciones `page` que añadir.

    Si el cuerpo se lee, siempre se devuelve una respuesta nueva con el cuerpo
    completo, de modo que las etapas siguientes lo pueden leer de nuevo.
    """

    def _eligible(self, exchange: Exchange) -> bool:
        if wants_bypass(exchange.original_request.headers.get_list("accept")):
            return False
        return exchange.response.is_success

    def _rewrite(self, exchange: Exchange, content: bytes) -> httpx.Response:
        response = exchange.response
        encoding = response.encoding or "utf-8"
        try:
            body = content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            logger.warning("Response body is not valid %s, left untouched: %s", encoding, exc)
            return rebuild_response(exchange.request, response, content)

        # Charsets no-UTF no pueden representar cualquier carácter: se escapa.
        ascii_only = not codecs.lookup(encoding).name.startswith("utf")
        links = parse_link_header(response.headers.get("link"))

        if detect_shape(body) is BodyShape.ARRAY:
            rewritten = wrap_array(body, links, ascii_only=ascii_only)
        elif links:
            rewritten = merge_object(body, links, ascii_only=ascii_only)
        else:
            rewritten = None

        if rewritten is None:
            return rebuild_response(exchange.request, response, content)
        return rebuild_response(exchange.request, response, rewritten.encode(encoding))

    def on_response(self, exchange: Exchange) -> httpx.Response:
        if not self._eligible(exchange):
            return exchange.response
        return self._rewrite(exchange, exchange.response.read())

    async def aon_response(self, exchange: Exchange) -> httpx.Response:
        if not self._eligible(exchange):
            return exchange.response
        return self._rewrite(exchange, await exchange.response.aread())


class HttpLoggingInterceptor:
    """Registra cada intercambio (método, URL, estado, tiempo y cabeceras).

    No lee el cuerpo: la respuesta se devuelve intacta.
    """

    def __init__(self, log: logging.Logger | None = None, *, level: int = logging.DEBUG) -> None:
        self._log = log or logger
        self._level = level

    def on_response(self, exchange: Exchange) -> httpx.Response:
        if self._log.isEnabledFor(self._level):
            request, response = exchange.request, exchange.response
            elapsed_ms = (time.perf_counter() - exchange.started_at) * 1000
            self._log.log(
                self._level,
                "%s %s -> %s (%.0f ms)",
                request.method,
                request.url,
                response.status_code,
                elapsed_ms,
            )
            for name, value in response.headers.multi_items():
                self._log.log(self._level, "  %s: %s", name, value)
        return exchange.response

    async def aon_response(self, exchange: Exchange) -> httpx.Response:
        return self.on_response(exchange)
