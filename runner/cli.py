from __future__ import annotations

import argparse
import os
from pathlib import Path

from fileserver.config import PUBLIC_DIRNAME


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the smoke runner."""
    parser = argparse.ArgumentParser(description="Public file server smoke runner")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8000"))
    parser.add_argument("--public", default=str(Path.cwd() / PUBLIC_DIRNAME))
    parser.add_argument("--timeout", type=float, default=20.0)
    parser.add_argument(
        "--seed",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="write the fixture files into the public directory first",
    )
    return parser.parse_args(argv)
