"""Jerarquía de errores del cliente.

Reglas:
- Errores de transporte (`httpx.TransportError`) NO se envuelven: se propagan.
- Metadata de paginación mal formada nunca es un error (se ignora el segmento).
- Todo lo que el caller puede recibir deriva de `HubLinkError` y lleva un `code`.
"""

from __future__ import annotations

from typing import Any


class HubLinkError(Exception):
    """Base de todos los errores del cliente."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class DecodeError(HubLinkError):
    """El cuerpo no pudo decodificarse al tipo pedido (JSON inválido o tipos)."""

    def __init__(self, target: Any, cause: Exception) -> None:
        super().__init__(
            f"cannot decode response body as {target!r}: {cause}",
            code="DECODE_ERROR",
        )
        self.target = target
        self.cause = cause


class NoConverterError(HubLinkError):
    """Ningún conversor es aplicable al tipo pedido."""

    def __init__(self, target: Any) -> None:
        super().__init__(f"no converter available for {target!r}", code="NO_CONVERTER")
        self.target = target


class ApiStatusError(HubLinkError):
    """La API respondió con un estado no exitoso (no-2xx)."""

    def __init__(self, status_code: int, url: str, body: str) -> None:
        super().__init__(f"HTTP {status_code} for {url}", code=f"HTTP_{status_code}")
        self.status_code = status_code
        self.url = url
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "status_code": self.status_code, "url": self.url}
