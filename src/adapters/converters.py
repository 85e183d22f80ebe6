"""Conversión de cuerpos HTTP (pydantic `TypeAdapter` + `json`).

Reglas:
- `str` => el cuerpo se devuelve tal cual (ya pasado por el pipeline), sin JSON.
- Cualquier otro tipo => `TypeAdapter(tipo).validate_json(cuerpo)`.
- Cuerpos salientes => siempre el encoder genérico.

La selección de conversor devuelve `None` cuando el tipo no es soportable
(esquema no generable, tipo inválido, memoria agotada): es un resultado normal
y quien llama decide qué hacer.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from functools import partial
from typing import Any, Callable

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import to_jsonable_python

from core.domain.models import format_naive_datetime
from core.errors import DecodeError

logger = logging.getLogger(__name__)

ResponseConverter = Callable[[httpx.Response], Any]


def _read_text(response: httpx.Response) -> str:
    response.read()
    return response.text


def _encode_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    if isinstance(value, datetime) and value.tzinfo is None:
        return format_naive_datetime(value)
    return to_jsonable_python(value, by_alias=True)


class BodyConverter:
    """Decide cómo materializar cada cuerpo según el tipo pedido."""

    def __init__(self, *, indent: int | None = None) -> None:
        self.indent = indent
        self._adapters: dict[Any, TypeAdapter[Any]] = {}

    def _adapter(self, target: Any) -> TypeAdapter[Any]:
        try:
            return self._adapters[target]
        except KeyError:
            adapter = self._adapters[target] = TypeAdapter(target)
            return adapter
        except TypeError:
            # Tipo no hasheable: sin caché.
            return TypeAdapter(target)

    def select_response_converter(self, target: Any) -> ResponseConverter | None:
        if target is str:
            return _read_text
        try:
            adapter = self._adapter(target)
        except (PydanticSchemaGenerationError, TypeError, MemoryError) as exc:
            logger.warning("No response converter for %r: %s", target, exc)
            return None
        return partial(self._decode, adapter, target)

    @staticmethod
    def _decode(adapter: TypeAdapter[Any], target: Any, response: httpx.Response) -> Any:
        body = response.read()
        try:
            return adapter.validate_json(body)
        except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(target, exc) from exc

    def encode_request(self, value: Any) -> bytes:
        """Serializa un cuerpo saliente (modelos por alias, fechas naive con formato fijo)."""

        text = json.dumps(
            value,
            default=_encode_default,
            ensure_ascii=False,
            indent=self.indent,
        )
        return text.encode("utf-8")
