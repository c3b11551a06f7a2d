"""HTTP-level tests through the FastAPI app."""

from __future__ import annotations

import pytest

from fileserver.api.routes import ALL_METHODS, request_target


def test_serves_file_bytes_without_content_type(client):
    r = client.get("/hello.txt")
    assert r.status_code == 200
    assert r.content == b"hi"
    assert "content-type" not in r.headers


def test_missing_file_returns_404(client):
    r = client.get("/nope.txt")
    assert r.status_code == 404
    assert r.content == b"404 Not Found"
    assert r.headers["content-type"].startswith("text/plain")


@pytest.mark.parametrize("path", ["/", "/sub", "/sub/"])
def test_directories_return_404(client, path):
    r = client.get(path)
    assert r.status_code == 404
    assert r.content == b"404 Not Found"


def test_percent_encoded_name(client):
    r = client.get("/a%20b.txt")
    assert r.status_code == 200
    assert r.content == b"x"


def test_invalid_utf8_escape_returns_404(client):
    assert client.get("/%FF").status_code == 404


def test_query_string_is_ignored(client):
    assert client.get("/hello.txt?v=2").content == b"hi"


def test_binary_body_round_trips(client):
    assert client.get("/blob.bin").content == bytes(range(256))


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_method_is_not_inspected(client, method):
    r = client.request(method, "/hello.txt")
    assert r.status_code == 200
    assert r.content == b"hi"


def test_head_is_served_without_body(client):
    r = client.head("/hello.txt")
    assert r.status_code == 200
    assert r.headers["content-length"] == "2"
    assert r.content == b""


def test_all_methods_are_routed():
    assert {"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"} <= set(ALL_METHODS)


def test_encoded_traversal_escapes_root_by_default(client):
    r = client.get("/%2E%2E%2Fsecret.txt")
    assert r.status_code == 200
    assert r.content == b"outside the root"


def test_encoded_traversal_blocked_when_confined(confined_client):
    r = confined_client.get("/%2E%2E%2Fsecret.txt")
    assert r.status_code == 404
    assert r.content == b"404 Not Found"
    assert confined_client.get("/hello.txt").content == b"hi"


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
def test_framework_routes_are_not_exposed(client, public_dir, path):
    (public_dir / path.lstrip("/")).write_bytes(b"served from disk")
    assert client.get(path).content == b"served from disk"


def test_repeated_requests_are_identical(client):
    first = client.get("/blob.bin")
    second = client.get("/blob.bin")
    assert (first.status_code, first.content) == (second.status_code, second.content)


def test_lifespan_runs_with_missing_root(tmp_path):
    from fastapi.testclient import TestClient

    from fileserver.config import ServerConfig
    from fileserver.main import create_app

    with TestClient(create_app(ServerConfig(root=tmp_path / "absent"))) as c:
        assert c.get("/anything").status_code == 404


class _FakeRequest:
    def __init__(self, scope):
        self.scope = scope


def test_request_target_prefers_raw_path():
    req = _FakeRequest({"raw_path": b"/a%20b.txt?x=1", "path": "/a b.txt"})
    assert request_target(req) == b"/a%20b.txt"


def test_request_target_falls_back_to_quoted_path():
    req = _FakeRequest({"path": "/a b.txt"})
    assert request_target(req) == b"/a%20b.txt"
