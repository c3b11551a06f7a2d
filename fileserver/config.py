"""Process configuration for the file server.

The served root is fixed at startup (``<cwd>/public``) and is never mutated
afterwards; it is handed to the resolver at construction.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "PUBLIC_DIRNAME",
    "ServerConfig",
]

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
PUBLIC_DIRNAME = "public"


class ServerConfig(BaseModel):
    """Read-only server settings."""

    model_config = ConfigDict(frozen=True)

    root: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    # Reject decoded paths that escape the root (off to match the reference server).
    confine_to_root: bool = False

    @classmethod
    def from_cwd(cls, **overrides) -> ServerConfig:
        """Default configuration: serve ``public/`` under the current working directory."""
        return cls(root=Path.cwd() / PUBLIC_DIRNAME, **overrides)
