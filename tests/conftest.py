from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fileserver.config import ServerConfig
from fileserver.main import create_app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A public root with the canonical scenarios plus a file just outside it."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "hello.txt").write_bytes(b"hi")
    (root / "a b.txt").write_bytes(b"x")
    (root / "sub").mkdir()
    (root / "blob.bin").write_bytes(bytes(range(256)))
    (tmp_path / "secret.txt").write_bytes(b"outside the root")
    return root


@pytest.fixture
def client(public_dir: Path) -> TestClient:
    return TestClient(create_app(ServerConfig(root=public_dir)))


@pytest.fixture
def confined_client(public_dir: Path) -> TestClient:
    return TestClient(create_app(ServerConfig(root=public_dir, confine_to_root=True)))
