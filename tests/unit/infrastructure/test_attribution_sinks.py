import json

import httpx
import pytest

from socialhub.domain.ports import AttributionEvent
from socialhub.infrastructure.adapters import InMemoryAttributionSink, MeasurementProtocolSink


@pytest.fixture
def event() -> AttributionEvent:
    return AttributionEvent(
        tracking_id="track_1",
        event_name="social_media_click",
        parameters={"source": "bluesky", "medium": "social"},
    )


class TestInMemoryAttributionSink:
    @pytest.mark.asyncio
    async def test_records_events(self, event):
        sink = InMemoryAttributionSink()

        await sink.record(event)

        assert sink.events == [event]


class TestMeasurementProtocolSink:
    @pytest.mark.asyncio
    async def test_sends_event(self, event):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(204)

        sink = MeasurementProtocolSink("G-TEST", "secret", transport=httpx.MockTransport(handler))

        await sink.record(event)

        request = requests[0]
        assert request.url.path == "/mp/collect"
        assert request.url.params["measurement_id"] == "G-TEST"
        body = json.loads(request.content)
        assert body["client_id"] == "track_1"
        assert body["events"] == [{"name": "social_media_click", "params": {"source": "bluesky", "medium": "social"}}]

    @pytest.mark.asyncio
    async def test_raises_on_http_error(self, event):
        sink = MeasurementProtocolSink(
            "G-TEST", "secret", transport=httpx.MockTransport(lambda r: httpx.Response(500))
        )

        with pytest.raises(httpx.HTTPStatusError):
            await sink.record(event)
