#!/usr/bin/env python3
"""High-level smoke runner against a running file server.

Steps:
- optionally seed the public directory with fixtures
- wait until the server answers
- fetch every file twice (bytes must match disk, both times)
- fetch a missing path, the root and every subdirectory (must be 404)
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx

from fileserver.domain.resolution import NOT_FOUND_BODY, STATUS_NOT_FOUND, STATUS_OK
from fileserver.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import encode_path, fetch, wait_for_server
from runner.types import Probe
from runner.utils import collect_public, summarize
from tools.fixtures import seed as seed_fixtures

setup_logging()
logger = get_logger("runner")

MISSING_PATH = "/__smoke__/does-not-exist.txt"


async def _probe_files(
    client: httpx.AsyncClient, public_dir: Path, files: list[str]
) -> list[Probe]:
    tasks = []
    for rel in files:
        expected = (public_dir / rel).read_bytes()
        path = encode_path(rel)
        # Twice per file: repeated requests must give identical bytes.
        for _ in range(2):
            tasks.append(
                fetch(client, path, expected_status=STATUS_OK, expected_body=expected)
            )
    return list(await asyncio.gather(*tasks))


async def _probe_not_found(client: httpx.AsyncClient, dirs: list[str]) -> list[Probe]:
    paths = [MISSING_PATH, "/"] + [encode_path(d) for d in dirs]
    tasks = [
        fetch(client, p, expected_status=STATUS_NOT_FOUND, expected_body=NOT_FOUND_BODY)
        for p in paths
    ]
    return list(await asyncio.gather(*tasks))


async def run_smoke(
    *,
    base_url: str,
    public_dir: Path,
    timeout_s: float = 20.0,
    seed: bool = True,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    if seed:
        written = seed_fixtures(public_dir)
        logger.info("fixtures.seeded", extra={"event": "fixtures_seeded", "count": len(written)})
    files, dirs = collect_public(public_dir)

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0, transport=transport) as client:
        await wait_for_server(client, timeout_s=timeout_s)
        probes = await _probe_files(client, public_dir, files)
        probes += await _probe_not_found(client, dirs)

    summary, exit_code = summarize(probes)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            public_dir=Path(args.public),
            timeout_s=args.timeout,
            seed=args.seed,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
