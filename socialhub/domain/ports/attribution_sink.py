"""
Outbound port for attribution event delivery.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class AttributionEvent:
    """One social-to-website attribution event."""

    tracking_id: str
    event_name: str
    parameters: dict[str, Any]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class AttributionSink(ABC):
    """Destination for attribution events (analytics backend, store, ...)."""

    @abstractmethod
    async def record(self, event: AttributionEvent) -> None:
        """
        Record one event.

        Raises:
            Exception: Any delivery failure; callers convert it to a result
        """
        ...
