from __future__ import annotations

import asyncio
import time
from urllib.parse import quote

import httpx

from fileserver.logging_conf import get_logger
from runner.types import Probe, ProbeError, ServerUnavailableError

logger = get_logger("runner.client")


def encode_path(rel_path: str) -> str:
    """Percent-encode a public-relative file path into a request path."""
    return "/" + quote(rel_path.lstrip("/"), safe="/")


async def wait_for_server(
    client: httpx.AsyncClient, timeout_s: float = 20.0, interval_s: float = 0.25
) -> None:
    """Request `/` until the server answers with any HTTP status.

    A 404 is a perfectly good answer here: the root maps to a directory.
    """
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        try:
            r = await client.get("/")
        except httpx.TransportError:
            await asyncio.sleep(interval_s)
            continue
        logger.info("server.up", extra={"event": "server_up", "status_code": r.status_code})
        return
    raise ServerUnavailableError(f"server did not answer within {timeout_s}s")


async def fetch(
    client: httpx.AsyncClient,
    path: str,
    *,
    expected_status: int,
    expected_body: bytes | None = None,
    retries: int = 3,
) -> Probe:
    """GET an already-encoded request path and record the outcome, with retry.

    - Only transport errors are retried; any HTTP status is a result
    - Logs each retry with the path and attempt number
    """
    last_err: Exception | None = None
    for attempt in range(retries):
        started = time.perf_counter()
        try:
            r = await client.get(path)
        except httpx.TransportError as e:
            last_err = e
            logger.warning(
                "fetch.retry",
                extra={
                    "event": "fetch_retry",
                    "path": path,
                    "attempt": attempt + 1,
                    "error": str(e),
                },
            )
            continue
        return Probe(
            path=path,
            expected_status=expected_status,
            status=r.status_code,
            body=r.content,
            elapsed_ms=(time.perf_counter() - started) * 1000.0,
            expected_body=expected_body,
        )
    raise ProbeError(f"request failed for {path}: {last_err}")
