"""CLI principal (Typer).

Comandos:
- `get PATH`: request GET a través del pipeline; imprime el sobre JSON.
- `doctor run|setup`: diagnóstico y configuración.
"""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.converters import BodyConverter
from adapters.http_client import build_client
from adapters.rest_client import RestClient
from cli import doctor
from cli.ui_components import build_pagination_table, print_banner
from core.config import AppSettings
from core.errors import HubLinkError
from core.observability import setup_logging

app = typer.Typer(no_args_is_help=True, help="GitHub REST client with Link pagination envelopes.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.command()
def get(
    path: str = typer.Argument(..., help="Ruta relativa a la REST URL (p.ej. users/octocat/repos)."),
    page: int | None = typer.Option(None, "--page", min=1, help="Página a pedir."),
    per_page: int | None = typer.Option(None, "--per-page", min=1, max=100, help="Elementos por página."),
    raw: bool = typer.Option(False, "--raw", help="Imprime el cuerpo como texto (tras el pipeline), sin decodificar JSON."),
    banner: bool = typer.Option(False, "--banner", help="Muestra el banner antes de la salida."),
) -> None:
    """GET a un recurso; las listas se devuelven como `{..., "items": [...]}`."""

    settings = AppSettings()
    setup_logging(settings.log_level)

    if banner:
        print_banner(_console)

    params: dict[str, int] = {}
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page

    api = RestClient(build_client(settings), BodyConverter(indent=settings.json_indent))
    try:
        with api:
            if raw:
                _console.print(api.get(path, str, params=params), markup=False, highlight=False)
                return
            envelope = api.get(path, params=params)
    except HubLinkError as exc:
        _console.print(f"[red]{exc.code}[/red] {exc.message}")
        raise typer.Exit(code=1) from exc

    _console.print_json(data=envelope)
    table = build_pagination_table(envelope)
    if table is not None:
        _console.print(table)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
