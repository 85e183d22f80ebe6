"""CLI: `get` and `doctor` commands against a mock transport."""

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from adapters.http_client import build_client
from cli import doctor
from cli import main as cli_main

runner = CliRunner()


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/users/octocat/repos":
        link = '<https://api.github.com/users/octocat/repos?page=2>; rel="next"'
        return httpx.Response(200, headers={"Link": link}, json=[{"id": 1, "name": "hello"}])
    if request.url.path == "/rate_limit":
        return httpx.Response(200, json={"rate": {}})
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def mocked_transport(monkeypatch):
    seen: list[httpx.Request] = []

    def handler(request):
        seen.append(request)
        return _handler(request)

    def fake_build_client(settings, credentials=None):
        return build_client(settings, credentials, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli_main, "build_client", fake_build_client)
    monkeypatch.setattr(doctor, "build_client", fake_build_client)
    plain = Console(color_system=None, force_terminal=False, width=120)
    monkeypatch.setattr(cli_main, "_console", plain)
    monkeypatch.setattr(doctor, "_console", plain)
    return seen


def test_get_prints_envelope_and_pagination(mocked_transport):
    result = runner.invoke(cli_main.app, ["get", "users/octocat/repos", "--per-page", "1"])
    assert result.exit_code == 0, result.output
    assert '"items"' in result.output
    assert '"next": "2"' in result.output
    assert "Pagination" in result.output
    assert mocked_transport[0].url.params["per_page"] == "1"


def test_get_raw(mocked_transport):
    result = runner.invoke(cli_main.app, ["get", "users/octocat/repos", "--raw"])
    assert result.exit_code == 0, result.output
    assert '{"next":"2","items":[{"id":1,"name":"hello"}]}' in result.output


def test_get_error_status(mocked_transport):
    result = runner.invoke(cli_main.app, ["get", "nope"])
    assert result.exit_code == 1
    assert "HTTP_404" in result.output


def test_doctor_run(mocked_transport, monkeypatch):
    monkeypatch.setenv("HUBLINK_TOKEN", "Basic abc")
    result = runner.invoke(cli_main.app, ["doctor", "run"])
    assert result.exit_code == 0, result.output
    assert "basic configured" in result.output
    assert "HTTP 200" in result.output
