"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `ApiModel` fija la convención de nombres de la API (snake_case) en un único sitio.

Nota:
- Estos modelos describen *qué* viaja por el pipeline, no *cómo* se transporta.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_snake
from pydantic.config import ConfigDict

# Formato de fechas "naive" (sin zona) que usa la API REST.
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_naive_datetime(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            # ISO-8601 u otro formato: lo resuelve pydantic.
            return value
    return value


def format_naive_datetime(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


ApiDateTime = Annotated[
    datetime,
    BeforeValidator(_parse_naive_datetime),
    PlainSerializer(format_naive_datetime, return_type=str, when_used="json"),
]


class ApiModel(BaseModel):
    """Base para los tipos que el caller decodifica desde la API.

    - Los nombres de campo se mapean en minúsculas con guiones bajos.
    - Atributos privados y `computed_field`/properties no se leen del JSON.
    - Campos desconocidos se ignoran (la API añade campos con frecuencia).
    """

    model_config = ConfigDict(
        alias_generator=to_snake,
        populate_by_name=True,
        extra="ignore",
    )


class Credentials(BaseModel):
    """Credenciales compartidas que el `AuthInjector` lee en cada request.

    Por qué un objeto explícito:
    - Sustituye al estado global: la aplicación dueña lo actualiza (p.ej. tras
      re-autenticarse) y cada request ve la última versión.
    """

    model_config = ConfigDict(validate_assignment=True)

    token: str | None = Field(
        default=None,
        description="Token de acceso o cabecera `Basic ...` completa.",
    )
    otp: str | None = Field(
        default=None,
        description="Código 2FA (one-time password).",
    )
    scraping: bool = Field(
        default=False,
        description="Suprime el User-Agent identificativo.",
    )

    @field_validator("token", "otp")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    def snapshot(self) -> Credentials:
        """Copia consistente para aplicar a un único request."""

        return self.model_copy()


class PageLink(BaseModel):
    """Relación de paginación extraída de la cabecera `Link`."""

    model_config = ConfigDict(frozen=True)

    rel: str = Field(
        ...,
        min_length=1,
        description="Nombre de la relación (next, prev, first, last).",
    )
    page: str = Field(
        ...,
        description="Valor del parámetro `page` de la URL enlazada.",
    )
