"""
Explicit result-or-error value used inside the core.

Adapters and aggregators pass Outcome values around instead of mixing
None, empty lists and tagged result objects. The public shapes
(PostResult, AdMetrics | None, list[CampaignData]) are derived from an
Outcome at the boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why an operation failed."""

    PRECONDITION = "precondition"  # Required content missing for the platform
    VENDOR = "vendor"  # Non-2xx status or vendor error envelope
    TRANSPORT = "transport"  # Network or decoding failure
    UNSUPPORTED = "unsupported"  # Unknown platform or operation
    TIMEOUT = "timeout"  # Dispatch deadline exceeded


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: T | None = None
    error: str | None = None
    kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, kind: ErrorKind) -> "Outcome[T]":
        return cls(error=error, kind=kind)

    def value_or(self, default: T) -> T:
        return self.value if self.ok and self.value is not None else default
