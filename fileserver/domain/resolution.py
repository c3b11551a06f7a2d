from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Outcome",
    "Resolution",
    "NOT_FOUND_BODY",
    "STATUS_OK",
    "STATUS_NOT_FOUND",
]

STATUS_OK = 200
STATUS_NOT_FOUND = 404
NOT_FOUND_BODY = b"404 Not Found"


class Outcome(str, Enum):
    found = "found"
    not_found = "not_found"


@dataclass(frozen=True)
class Resolution:
    """The response produced for a single request: a status and raw body bytes."""

    status: int
    body: bytes

    @classmethod
    def ok(cls, body: bytes) -> Resolution:
        return cls(status=STATUS_OK, body=body)

    @classmethod
    def not_found(cls) -> Resolution:
        return cls(status=STATUS_NOT_FOUND, body=NOT_FOUND_BODY)

    @property
    def outcome(self) -> Outcome:
        return Outcome.found if self.status == STATUS_OK else Outcome.not_found

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.found
