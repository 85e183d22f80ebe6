"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

PAGINATION_RELS = ("first", "prev", "next", "last")


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("hublink", style="bold cyan")
    subtitle = Text("GitHub REST • Link pagination • JSON envelopes", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_pagination_table(envelope: Any) -> Table | None:
    """Tabla con las relaciones de paginación presentes en el sobre (o None)."""

    if not isinstance(envelope, dict):
        return None
    rows = [(rel, envelope[rel]) for rel in PAGINATION_RELS if isinstance(envelope.get(rel), str)]
    if not rows:
        return None

    table = Table(title="Pagination")
    table.add_column("Relation", style="cyan", no_wrap=True)
    table.add_column("Page", style="white")
    for rel, page in rows:
        table.add_row(rel, page)
    items = envelope.get("items")
    if isinstance(items, list):
        table.caption = f"{len(items)} items on this page"
    return table
