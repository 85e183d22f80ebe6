"""Síntesis del sobre JSON con la paginación.

Transforma:
- `[...]`  -> `{"next":"2",...,"items":[...]}` (siempre, haya o no `Link`)
- `{...}`  -> `{"next":"2",...,<campos originales>}` (solo si hay relaciones)

Se construye un valor JSON real y se serializa con `json`, así las claves y
valores quedan siempre bien escapados.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from core.domain.models import PageLink
from core.services.link_header import pagination_fields

logger = logging.getLogger(__name__)

ITEMS_KEY = "items"


class BodyShape(str, Enum):
    ARRAY = "array"
    OTHER = "other"


def detect_shape(body: str) -> BodyShape:
    """Mira solo el primer carácter del cuerpo."""

    return BodyShape.ARRAY if body[:1] == "[" else BodyShape.OTHER


def dump_compact(value: Any, *, ascii_only: bool = False) -> str:
    """JSON compacto; `ascii_only` escapa todo lo no-ASCII como `\\uXXXX`."""

    return json.dumps(value, ensure_ascii=ascii_only, separators=(",", ":"))


def _loads(body: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        logger.warning("Response body is not valid JSON, left untouched: %s", exc)
        return None


def wrap_array(body: str, links: list[PageLink], *, ascii_only: bool = False) -> str | None:
    """Envuelve un array en `{<paginación>, "items": [...]}`.

    Devuelve None si el cuerpo no es un array JSON válido.
    """

    items = _loads(body)
    if not isinstance(items, list):
        return None

    envelope: dict[str, Any] = dict(pagination_fields(links))
    envelope[ITEMS_KEY] = items
    return dump_compact(envelope, ascii_only=ascii_only)


def merge_object(body: str, links: list[PageLink], *, ascii_only: bool = False) -> str | None:
    """Antepone la paginación a los campos de un objeto JSON.

    Devuelve None si no hay relaciones o el cuerpo no es un objeto JSON.
    Si un campo original se llama igual que una relación, gana el campo
    original (semántica "la última clave gana" del JSON concatenado).
    """

    fields = pagination_fields(links)
    if not fields:
        return None

    original = _loads(body)
    if not isinstance(original, dict):
        return None

    collisions = fields.keys() & original.keys()
    if collisions:
        logger.warning("Pagination keys shadowed by response fields: %s", sorted(collisions))

    envelope: dict[str, Any] = dict(fields)
    envelope.update(original)
    return dump_compact(envelope, ascii_only=ascii_only)
