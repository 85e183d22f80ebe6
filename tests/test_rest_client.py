"""REST facade: typed results, status errors and request bodies.

Tests cover:
    - Paginated list endpoints decode into envelope models
    - Non-2xx responses raise ApiStatusError (body not rewritten)
    - Unsupported response types raise NoConverterError
    - Request bodies go through the generic encoder
"""

import json
from typing import Any

import httpx
import pytest

from adapters.http_client import build_async_client, build_client
from adapters.rest_client import AsyncRestClient, RestClient
from core.domain.models import ApiModel
from core.errors import ApiStatusError, NoConverterError


class Issue(ApiModel):
    number: int
    title: str


class IssuePage(ApiModel):
    next: str | None = None
    prev: str | None = None
    items: list[Issue]


class Opaque:
    pass


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/repos/o/r/issues" and request.method == "GET":
        link = '<https://api.example.test/repos/o/r/issues?page=2>; rel="next"'
        return httpx.Response(200, headers={"Link": link}, json=[{"number": 1, "title": "Bug"}])
    if request.url.path == "/repos/o/r/issues" and request.method == "POST":
        created = json.loads(request.content)
        return httpx.Response(201, json={"number": 2, **created})
    if request.url.path == "/repos/o/r/readme":
        return httpx.Response(200, text="# Hello")
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def api(settings):
    with RestClient(build_client(settings, transport=httpx.MockTransport(_handler))) as client:
        yield client


def test_get_decodes_envelope(api):
    page = api.get("repos/o/r/issues", IssuePage)
    assert page.next == "2"
    assert page.prev is None
    assert page.items == [Issue(number=1, title="Bug")]


def test_get_untyped_returns_plain_json(api):
    page = api.get("repos/o/r/issues")
    assert page == {"next": "2", "items": [{"number": 1, "title": "Bug"}]}


def test_get_raw_text(api):
    assert api.get("repos/o/r/readme", str) == "# Hello"


def test_error_status_raises_with_original_body(api):
    with pytest.raises(ApiStatusError) as excinfo:
        api.get("repos/o/missing", dict[str, Any])
    assert excinfo.value.status_code == 404
    assert json.loads(excinfo.value.body) == {"message": "Not Found"}
    assert excinfo.value.to_dict()["code"] == "HTTP_404"


def test_unsupported_type_raises_no_converter(api):
    with pytest.raises(NoConverterError):
        api.get("repos/o/r/issues", Opaque)


def test_post_encodes_body(api):
    issue = api.request("POST", "repos/o/r/issues", Issue, body={"title": "New"})
    assert issue == Issue(number=2, title="New")


async def test_async_client(settings):
    client = build_async_client(settings, transport=httpx.MockTransport(_handler))
    async with AsyncRestClient(client) as api:
        page = await api.get("repos/o/r/issues", IssuePage)
    assert page.items[0].title == "Bug"
