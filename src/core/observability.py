"""Logging del cliente (stdlib `logging` + `rich`).

Invariantes:
- Los módulos usan `logging.getLogger(__name__)`; nadie configura handlers salvo aquí.
- `setup_logging` es idempotente: llamarlo dos veces no duplica salida.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_FLAG = "_hublink_handler"


def setup_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Configura el logger raíz con un `RichHandler` sobre stderr."""

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in root.handlers:
        if getattr(handler, _HANDLER_FLAG, False):
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    setattr(handler, _HANDLER_FLAG, True)
    root.addHandler(handler)
