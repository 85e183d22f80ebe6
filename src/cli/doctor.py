"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get("rate_limit")
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = AppSettings()

    table = Table(title="hublink Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("REST URL", "OK", settings.rest_url)
    table.add_row("Media type", "OK", settings.media_type)
    if settings.token:
        kind = "basic" if settings.token.startswith("Basic") else "token"
        table.add_row("Credentials", "OK", f"{kind} configured")
    else:
        table.add_row("Credentials", "OPTIONAL", "Anonymous requests (low rate limit)")
    table.add_row("OTP", "SET" if settings.otp else "-", "X-GitHub-OTP header")
    table.add_row("User-Agent", "SUPPRESSED" if settings.scraping else "OK", settings.user_agent)

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def setup() -> None:
    """Store an existing token (and optional OTP) in the user config .env."""

    token = typer.prompt("Token (or full 'Basic ...' value)", hide_input=True).strip()
    otp = typer.prompt("OTP (leave empty to clear)", default="", show_default=False).strip()

    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars(
        {
            "HUBLINK_TOKEN": token,
            "HUBLINK_OTP": otp or None,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
