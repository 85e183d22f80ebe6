"""Parseo de la cabecera `Link` (estilo RFC 5988).

Formato consumido:
    <https://api.github.com/user/repos?page=3>; rel="next", <...?page=50>; rel="last"

Limitación conocida:
- Solo se representa paginación por número (`page=`). Enlaces con cursores
  opacos (`after=`, `before=`) no aportan relación.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qs, urlsplit

from core.domain.models import PageLink

logger = logging.getLogger(__name__)


def parse_link_header(value: str | None) -> list[PageLink]:
    """Extrae las relaciones paginadas de una cabecera `Link`.

    Un segmento mal formado (sin `<...>`, sin `rel=` o sin `page`) se ignora y
    el resto se procesa igualmente: nunca lanza.
    """

    if not value:
        return []

    links: list[PageLink] = []
    for segment in value.split(","):
        if not segment.strip():
            continue
        link = _parse_segment(segment)
        if link is not None:
            links.append(link)
    return links


def _parse_segment(segment: str) -> PageLink | None:
    parts = segment.split(";")
    if len(parts) < 2:
        logger.debug("Link segment without parameters ignored: %r", segment)
        return None

    target = parts[0].strip()
    if not (target.startswith("<") and target.endswith(">")):
        logger.debug("Link segment without <url> ignored: %r", segment)
        return None

    rel = None
    for param in parts[1:]:
        param = param.strip()
        if param[:4].lower() == "rel=":
            rel = param[4:].replace('"', "").strip()
            break
    if not rel:
        logger.debug("Link segment without rel ignored: %r", segment)
        return None

    query = parse_qs(urlsplit(target[1:-1].strip()).query, keep_blank_values=True)
    pages = query.get("page")
    if not pages:
        return None
    return PageLink(rel=rel, page=pages[0])


def pagination_fields(links: list[PageLink]) -> dict[str, str]:
    """`{rel: page}` en orden de aparición (la última repetición gana)."""

    fields: dict[str, str] = {}
    for link in links:
        fields[link.rel] = link.page
    return fields
