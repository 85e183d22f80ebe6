"""Contratos de las etapas del pipeline HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite componer interceptores (auth, negociación, paginación, logging)
  en cualquier orden y testearlos sin red.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class Exchange:
    """Un par request/response tal y como lo ven las etapas de respuesta.

    - `original_request`: el request construido por el caller, antes de las etapas.
    - `request`: el request realmente enviado (con cabeceras estampadas).
    - `started_at`: `time.perf_counter()` justo antes de llamar al transporte.
    """

    original_request: httpx.Request
    request: httpx.Request
    response: httpx.Response
    started_at: float


@runtime_checkable
class RequestStage(Protocol):
    """Etapa de salida: recibe un request y devuelve el request a enviar."""

    def on_request(self, request: httpx.Request) -> httpx.Request:
        ...


@runtime_checkable
class ResponseStage(Protocol):
    """Etapa de entrada.

    Reglas de diseño:
    - Ambas variantes devuelven la respuesta a entregar (la misma u otra nueva).
    - Si una etapa lee el cuerpo, debe devolver una respuesta nueva y legible.
    """

    def on_response(self, exchange: Exchange) -> httpx.Response:
        ...

    async def aon_response(self, exchange: Exchange) -> httpx.Response:
        ...
