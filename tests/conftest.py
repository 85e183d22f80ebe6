"""Root conftest: shared test configuration."""

import os
import tempfile

import pytest

# La config de usuario (.env global) se resuelve al importar `core.config`:
# apuntarla a un directorio vacío antes de que ningún test lo importe.
os.environ["XDG_CONFIG_HOME"] = tempfile.mkdtemp(prefix="hublink-tests-")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.upper().startswith("HUBLINK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    from core.config import AppSettings

    return AppSettings(_env_file=None, rest_url="https://api.example.test/")
