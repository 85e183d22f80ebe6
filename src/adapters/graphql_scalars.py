"""Adaptadores de escalares GraphQL (URI y DateTime).

La API GraphQL de GitHub entrega `URI` como string y `DateTime` como
`yyyy-MM-ddTHH:mm:ssZ`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from urllib.parse import ParseResult, urlparse

logger = logging.getLogger(__name__)

GRAPHQL_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def encode_uri(value: ParseResult) -> str:
    return value.geturl()


def decode_uri(value: object) -> ParseResult:
    return urlparse(str(value))


def encode_datetime(value: datetime) -> datetime:
    return value


def decode_datetime(value: object) -> datetime:
    """Parsea un `DateTime` GraphQL a datetime UTC.

    Un valor ilegible se registra y se sustituye por "ahora".
    """

    try:
        parsed = datetime.strptime(str(value), GRAPHQL_DATETIME_FORMAT)
    except ValueError:
        logger.error("Unparseable GraphQL DateTime %r (%s)", value, type(value).__name__)
        return datetime.now(timezone.utc)
    return parsed.replace(tzinfo=timezone.utc)
