"""
AttributionSink implementations.

InMemoryAttributionSink keeps events in process (development, tests).
MeasurementProtocolSink forwards them to GA4 via the Measurement Protocol.
"""

import httpx
import structlog

from ...domain.ports import AttributionEvent, AttributionSink

logger = structlog.get_logger()

GA4_COLLECT_URL = "https://www.google-analytics.com/mp/collect"


class InMemoryAttributionSink(AttributionSink):
    """
    In-memory implementation of AttributionSink.

    Events are lost on restart; use the Measurement Protocol sink or an
    external store in production.
    """

    def __init__(self) -> None:
        self._events: list[AttributionEvent] = []

    async def record(self, event: AttributionEvent) -> None:
        self._events.append(event)

    @property
    def events(self) -> list[AttributionEvent]:
        return list(self._events)


class MeasurementProtocolSink(AttributionSink):
    """Send attribution events to Google Analytics 4."""

    def __init__(
        self,
        measurement_id: str,
        api_secret: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._measurement_id = measurement_id
        self._api_secret = api_secret
        self._timeout = timeout
        self._transport = transport

    async def record(self, event: AttributionEvent) -> None:
        body = {
            # One pseudo client per tracked post
            "client_id": event.tracking_id,
            "events": [{"name": event.event_name, "params": event.parameters}],
        }
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                GA4_COLLECT_URL,
                params={"measurement_id": self._measurement_id, "api_secret": self._api_secret},
                json=body,
            )
            response.raise_for_status()

        logger.info("Attribution event sent to GA4", tracking_id=event.tracking_id)
