from __future__ import annotations

import os

from ..domain.paths import decode_request_path, is_within_root, join_root, url_path
from ..domain.resolution import Resolution

__all__ = ["FileResolver", "read_file"]


def read_file(path: str) -> bytes:
    """Read the whole file at ``path`` in binary mode.

    Raises whatever ``open``/``read`` raise (OSError, or ValueError for an
    embedded NUL byte).
    """
    with open(path, "rb") as fh:
        return fh.read()


class FileResolver:
    """Map request paths to files under a fixed root directory.

    The root is captured once at construction and never changes. Instances
    hold no other state, so one resolver can serve any number of concurrent
    requests.

    With ``confine_to_root=False`` (the default) a decoded path containing
    ``..`` may escape the root, matching the reference server. Set it to
    True to answer such requests with 404 instead.
    """

    def __init__(self, root: str | os.PathLike[str], *, confine_to_root: bool = False):
        self._root = os.fspath(root)
        self._confine = confine_to_root

    @property
    def root(self) -> str:
        return self._root

    @property
    def confine_to_root(self) -> bool:
        return self._confine

    def resolve(self, url: str) -> Resolution:
        """Resolve an absolute or server-relative request URL."""
        return self.resolve_path(url_path(url))

    def resolve_path(self, raw_path: str | bytes) -> Resolution:
        """Resolve a still percent-encoded request path.

        Every failure (decode error, missing file, directory, permission,
        I/O error) yields the same not-found resolution.
        """
        try:
            candidate = join_root(self._root, decode_request_path(raw_path))
            if self._confine and not is_within_root(self._root, candidate):
                return Resolution.not_found()
            body = read_file(candidate)
        except (OSError, ValueError):
            return Resolution.not_found()
        return Resolution.ok(body)
