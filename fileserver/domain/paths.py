from __future__ import annotations

import os
import re
from urllib.parse import unquote_to_bytes, urlsplit

__all__ = [
    "PathDecodeError",
    "decode_request_path",
    "url_path",
    "join_root",
    "is_within_root",
]

# A '%' that does not introduce a two-digit hex escape.
_MALFORMED_ESCAPE_RE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


class PathDecodeError(ValueError):
    """Raised when a request path is not a valid percent-encoded UTF-8 string."""


def decode_request_path(raw: str | bytes) -> str:
    """Percent-decode a URL path component.

    Rules:
    - Every ``%XX`` triplet becomes the byte ``0xXX``.
    - The decoded bytes must form valid UTF-8.
    - ``+`` is kept literally (this is a path, not a form body).

    Raises:
        PathDecodeError: on a malformed escape or invalid UTF-8.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else bytes(raw)
    if _MALFORMED_ESCAPE_RE.search(data):
        raise PathDecodeError("malformed percent-escape in request path")
    try:
        return unquote_to_bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise PathDecodeError("request path is not valid UTF-8") from e


def url_path(url: str) -> str:
    """Return the (still encoded) path component of an absolute or relative URL."""
    return urlsplit(url).path or "/"


def join_root(root: str, decoded: str) -> str:
    """Concatenate the root directory and a decoded request path.

    No normalization happens here: ``..`` segments are kept as-is.
    """
    return f"{root}/{decoded}"


def is_within_root(root: str, candidate: str) -> bool:
    """Return True if ``candidate`` canonicalizes to ``root`` or a path below it."""
    real_root = os.path.realpath(root)
    real_candidate = os.path.realpath(candidate)
    try:
        return os.path.commonpath([real_root, real_candidate]) == real_root
    except ValueError:  # different drives on Windows
        return False
