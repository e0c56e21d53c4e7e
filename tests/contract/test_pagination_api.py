"""Contract tests for the pagination HTTP API and RFC 9457 errors."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
import structlog

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

ENDPOINT = "/api/v1/pagination"


@pytest.fixture
def make_client(monkeypatch):
    from infrastructure.container import reset_container
    from presentation.main import create_app
    from starlette.testclient import TestClient

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    clients = []

    def _make(**env: str):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        reset_container()
        client = TestClient(create_app())
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
    reset_container()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.mark.contract
class TestPaginationEndpoint:

    def test_windowed_response(self, client):
        resp = client.get(ENDPOINT, params={"page": "10", "per_page": "5", "total": "100"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["pagination"] == {
            "page": 10,
            "per_page": 5,
            "total_pages": 20,
            "total": 100,
            "params": {"per_page": "5"},
        }
        assert data["offset"] == 45
        assert data["limit"] == 5
        assert data["page_numbers"] == list(range(5, 16))
        assert data["pinned_first"] is True
        assert data["pinned_last"] is True
        assert data["html"].startswith(
            '<a class="pg-page-first" href="/?page=1&per_page=5">1</a> '
        )

    def test_without_total(self, client):
        resp = client.get(ENDPOINT, params={"page": "3", "per_page": "20"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["pagination"]["page"] == 3
        assert data["pagination"]["total_pages"] == 0
        assert data["offset"] == 40
        assert data["page_numbers"] == []
        assert data["html"] == ""

    @pytest.mark.parametrize(
        "params",
        [
            {"page": "abc", "per_page": "xyz"},
            {"page": "-4", "per_page": "0"},
            {"page": "", "per_page": ""},
            {},
        ],
    )
    def test_malformed_input_sanitised(self, client, params):
        resp = client.get(ENDPOINT, params=params)
        assert resp.status_code == 200
        data = resp.json()
        assert data["pagination"]["page"] == 1
        assert data["pagination"]["per_page"] == 10
        assert data["offset"] == 0

    def test_per_page_clamped(self, client):
        resp = client.get(ENDPOINT, params={"page": "1", "per_page": "500"})
        assert resp.json()["pagination"]["per_page"] == 50

    def test_extra_params_forwarded_to_links(self, client):
        resp = client.get(
            ENDPOINT,
            params={"page": "2", "q": "red shoes", "total": "30", "url": "/items"},
        )
        data = resp.json()
        assert data["pagination"]["params"] == {"q": "red shoes"}
        assert '<a class="pg-page pg-page-selected" href="/items?page=2&q=red+shoes">2</a> ' in data["html"]
        assert "total=" not in data["html"]
        assert "url=" not in data["html"]

    def test_repeated_params_forwarded_as_list(self, client):
        resp = client.get(ENDPOINT + "?tag=a&tag=b&total=30")
        data = resp.json()
        assert data["pagination"]["params"] == {"tag": ["a", "b"]}
        assert 'href="/?page=3&tag=a&tag=b"' in data["html"]

    def test_page_beyond_total_clamped(self, client):
        resp = client.get(ENDPOINT, params={"page": "30", "per_page": "10", "total": "100"})
        data = resp.json()
        assert data["pagination"]["page"] == 10
        assert data["offset"] == 90

    def test_request_id_header(self, client):
        resp = client.get(ENDPOINT)
        assert resp.headers.get("X-Request-ID")

    def test_request_id_echoed(self, client):
        resp = client.get(ENDPOINT, headers={"X-Request-ID": "req-42"})
        assert resp.headers["X-Request-ID"] == "req-42"


@pytest.mark.contract
class TestUnboundedConfiguration:

    def test_all_returns_everything(self, make_client):
        client = make_client(APP_PAGINATOR_ALLOW_UNBOUNDED="true")
        resp = client.get(ENDPOINT, params={"page": "1", "per_page": "all", "total": "500"})
        data = resp.json()
        assert data["pagination"]["per_page"] == 0
        assert data["limit"] == 0
        assert data["offset"] == 0
        assert data["page_numbers"] == []

    def test_large_per_page_not_clamped(self, make_client):
        client = make_client(APP_PAGINATOR_ALLOW_UNBOUNDED="true")
        resp = client.get(ENDPOINT, params={"page": "1", "per_page": "500"})
        assert resp.json()["pagination"]["per_page"] == 500

    def test_custom_param_names(self, make_client):
        client = make_client(APP_PAGINATOR_PAGE_PARAM="p", APP_PAGINATOR_PER_PAGE_PARAM="size")
        resp = client.get(ENDPOINT, params={"p": "2", "size": "5", "total": "50"})
        data = resp.json()
        assert data["pagination"]["page"] == 2
        assert data["pagination"]["per_page"] == 5
        assert 'href="/?p=1&size=5"' in data["html"]

    def test_default_names_not_forwarded_when_renamed(self, make_client):
        client = make_client(APP_PAGINATOR_PAGE_PARAM="p", APP_PAGINATOR_PER_PAGE_PARAM="size")
        resp = client.get(
            ENDPOINT,
            params={"p": "2", "size": "5", "page": "9", "per_page": "3", "total": "50"},
        )
        data = resp.json()
        assert data["pagination"]["params"] == {"size": "5"}
        assert "page=9" not in data["html"]
        assert "per_page=" not in data["html"]


@pytest.mark.contract
class TestProblemDetails:

    def test_negative_total_rejected(self, client):
        resp = client.get(ENDPOINT, params={"total": "-1"})
        assert resp.status_code == 422
        assert resp.headers["content-type"].startswith("application/problem+json")
        data = resp.json()
        assert data["title"] == "Validation Error"
        assert data["status"] == 422
        assert data["instance"] == ENDPOINT
        assert any("total" in e.get("field", "") for e in data.get("errors", []))

    def test_non_numeric_total_rejected(self, client):
        resp = client.get(ENDPOINT, params={"total": "lots"})
        assert resp.status_code == 422

    @pytest.mark.parametrize(
        "url",
        [
            '"><script>alert(1)</script>',
            "/items\"onmouseover=\"x",
            "/items'x",
            "/items <b>",
            "javascript:alert(1)",
            "https://evil.example/",
            "//evil.example/items",
        ],
    )
    def test_unsafe_link_base_rejected(self, client, url):
        resp = client.get(ENDPOINT, params={"total": "30", "url": url})
        assert resp.status_code == 422
        assert any("url" in e.get("field", "") for e in resp.json().get("errors", []))

    def test_path_link_base_accepted(self, client):
        resp = client.get(ENDPOINT, params={"total": "30", "url": "/shop/items-2"})
        assert resp.status_code == 200
        assert 'href="/shop/items-2?page=1"' in resp.json()["html"]


@pytest.mark.contract
class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
