#!/usr/bin/env python3
"""Write deterministic fixture files into a public directory.

Usage: python tools/fixtures.py [PUBLIC_DIR]   (defaults to ./public)
"""
from __future__ import annotations

import base64
import sys
from pathlib import Path

# Deterministic 1x1 PNG (transparent) via base64, to have a binary fixture
_PNG_1x1 = base64.b64decode(
    b"iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO6wZSYAAAAASUVORK5CYII="
)

# Paths are relative to the public root, POSIX style.
FILES: list[tuple[str, bytes]] = [
    ("hello.txt", b"hi"),
    ("a b.txt", b"x"),
    ("index.html", b"<!doctype html><title>fixture</title><p>hi</p>"),
    ("café.txt", "café au lait\n".encode("utf-8")),
    ("sub/nested.txt", b"nested fixture\n"),
    ("img/pixel.png", _PNG_1x1),
    ("data/empty.bin", b""),
]


def seed(public_dir: Path) -> list[Path]:
    """Create every fixture under ``public_dir`` and return the written paths."""
    written: list[Path] = []
    for rel, data in FILES:
        path = public_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    public_dir = Path(args[0]) if args else Path.cwd() / "public"
    created = seed(public_dir)
    print(f"Created fixtures in {public_dir}:")
    for p in created:
        print(" -", p.relative_to(public_dir).as_posix())
    if len(created) != len(FILES):
        raise SystemExit(f"Expected {len(FILES)} fixtures, found {len(created)}")


if __name__ == "__main__":
    main()
