from unittest.mock import AsyncMock

import pytest

from socialhub.application.services import TrafficAttributionService
from socialhub.infrastructure.adapters import InMemoryAttributionSink


class TestTrafficAttributionService:
    @pytest.fixture
    def sink(self):
        return InMemoryAttributionSink()

    @pytest.fixture
    def service(self, sink):
        return TrafficAttributionService(sink)

    @pytest.mark.asyncio
    async def test_track_records_event(self, service, sink):
        result = await service.track_social_traffic("123", "linkedin", "https://shop.example.com")

        assert result.success is True
        assert result.tracking_id.startswith("track_")
        event = sink.events[0]
        assert event.tracking_id == result.tracking_id
        assert event.event_name == "social_media_click"
        assert event.parameters == {
            "source": "linkedin",
            "medium": "social",
            "campaign": "post_123",
            "content": "123",
            "page_location": "https://shop.example.com",
        }

    @pytest.mark.asyncio
    async def test_track_reports_sink_failure(self):
        sink = AsyncMock()
        sink.record.side_effect = ConnectionError("collect endpoint unreachable")
        service = TrafficAttributionService(sink)

        result = await service.track_social_traffic("123", "bluesky", "https://shop.example.com")

        assert result.success is False
        assert result.tracking_id is None
        assert result.error == "collect endpoint unreachable"

    @pytest.mark.asyncio
    async def test_report_default_range(self, service):
        report = await service.get_social_traffic_report()

        assert report.date_range == "last_30_days"
        assert report.social_sessions <= report.total_sessions
        assert [s.source for s in report.top_social_sources] == ["instagram", "linkedin", "tiktok", "facebook"]
        assert report.period_comparison.sessions_change.startswith("+")

    @pytest.mark.asyncio
    async def test_report_echoes_range(self, service):
        report = await service.get_social_traffic_report("last_7_days")

        assert report.date_range == "last_7_days"
