from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Probe:
    """One request issued by the smoke run and what came back."""

    path: str
    expected_status: int
    status: int
    body: bytes
    elapsed_ms: float
    expected_body: bytes | None = None

    @property
    def passed(self) -> bool:
        if self.status != self.expected_status:
            return False
        return self.expected_body is None or self.body == self.expected_body


class SmokeError(RuntimeError):
    """Raised when the smoke flow cannot proceed (e.g., server never answers)."""


class ServerUnavailableError(SmokeError):
    """Raised when the server does not answer within the startup timeout."""


class ProbeError(SmokeError):
    """Raised when a single request fails at the transport level after retries."""
