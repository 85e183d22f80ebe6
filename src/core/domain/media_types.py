"""Media types de la API de GitHub.

El negociador de contenido estampa `GITHUB_V3_JSON` en cada request; las
variantes HTML y "raw" marcan respuestas que no deben reescribirse.
"""

from __future__ import annotations

import re
from typing import Iterable

GITHUB_V3_JSON = "application/vnd.github.v3+json"
GITHUB_HTML = "application/vnd.github.html"
GITHUB_RAW = "application/vnd.github.raw"

# application/vnd.github.raw, application/vnd.github.v3.raw, ...VERSION.raw
_RAW_RE = re.compile(r"^application/vnd\.github(?:\.[A-Za-z0-9_-]+)?\.raw$", re.IGNORECASE)


def split_accept_values(values: Iterable[str]) -> list[str]:
    """Aplana valores de `Accept` (una o varias cabeceras, separadas por coma).

    Devuelve solo el media type, sin parámetros (`;q=0.9`) y en minúsculas.
    """

    out: list[str] = []
    for value in values:
        for part in value.split(","):
            media_type = part.split(";", 1)[0].strip().lower()
            if media_type:
                out.append(media_type)
    return out


def is_bypass_media_type(media_type: str) -> bool:
    """True para los media types HTML/raw que se devuelven tal cual."""

    media_type = media_type.strip().lower()
    return media_type == GITHUB_HTML or bool(_RAW_RE.match(media_type))


def wants_bypass(accept_values: Iterable[str]) -> bool:
    return any(is_bypass_media_type(v) for v in split_accept_values(accept_values))
