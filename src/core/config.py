"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (transporte HTTP, conversores) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.media_types import GITHUB_V3_JSON
from core.domain.models import Credentials


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "hublink"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "hublink"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "hublink"
    return Path.home() / ".config" / "hublink"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Un valor `None` elimina la clave (p.ej. borrar un OTP caducado).
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value is None:
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# hublink user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="HUBLINK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    rest_url: str = Field(
        default="https://api.github.com/",
        min_length=8,
        description="Base URL de la API REST.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="hublink",
        min_length=1,
        description="User-Agent identificativo (se omite en modo scraping).",
    )
    media_type: str = Field(
        default=GITHUB_V3_JSON,
        min_length=1,
        description="Media type fijo para Accept/Content-Type.",
    )

    token: str | None = Field(
        default=None,
        description="Token (o cabecera `Basic ...` completa) ya obtenido por el usuario.",
    )
    otp: str | None = Field(
        default=None,
        description="Código 2FA para la cabecera X-GitHub-OTP.",
    )
    scraping: bool = Field(
        default=False,
        description="Modo scraping: no se envía el User-Agent identificativo.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging raíz (DEBUG, INFO, WARNING...).",
    )
    log_http: bool = Field(
        default=False,
        description="Registra cada intercambio HTTP (método, URL, estado, cabeceras).",
    )
    json_indent: int | None = Field(
        default=None,
        ge=0,
        le=8,
        description="Indentación del JSON saliente (None => compacto).",
    )

    def credentials(self) -> Credentials:
        """Construye el objeto `Credentials` mutable a partir de la config."""

        return Credentials(token=self.token, otp=self.otp, scraping=self.scraping)
