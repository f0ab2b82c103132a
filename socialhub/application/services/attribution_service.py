"""
Application service for social traffic attribution.

Records one attribution event per published post and answers traffic
report queries. Report figures are static until an analytics backend is
connected; the report shape is the contract.
"""

import time

import structlog

from ...domain.models import (
    PeriodComparison,
    SocialSource,
    SocialTrafficReport,
    TrackingResult,
)
from ...domain.ports import AttributionEvent, AttributionSink
from ...infrastructure.logging import redact_secrets

logger = structlog.get_logger()

DEFAULT_REPORT_RANGE = "last_30_days"


class TrafficAttributionService:
    def __init__(self, sink: AttributionSink) -> None:
        self._sink = sink

    @staticmethod
    def build_event(post_id: str, platform: str, website_url: str, tracking_id: str) -> AttributionEvent:
        return AttributionEvent(
            tracking_id=tracking_id,
            event_name="social_media_click",
            parameters={
                "source": platform,
                "medium": "social",
                "campaign": f"post_{post_id}",
                "content": post_id,
                "page_location": website_url,
            },
        )

    async def track_social_traffic(
        self,
        post_id: str,
        platform: str,
        website_url: str,
    ) -> TrackingResult:
        """
        Record an attribution event for a published post.

        Returns:
            TrackingResult with a tracking id, or the delivery error
        """
        tracking_id = f"track_{int(time.time() * 1000)}"
        event = self.build_event(post_id, platform, website_url, tracking_id)

        try:
            await self._sink.record(event)
        except Exception as e:
            error_msg = redact_secrets(str(e)) or type(e).__name__
            logger.error(
                "Error tracking social media attribution",
                post_id=post_id,
                platform=platform,
                error=error_msg,
            )
            return TrackingResult(success=False, error=error_msg)

        logger.info(
            "Tracked social media attribution",
            tracking_id=tracking_id,
            post_id=post_id,
            platform=platform,
        )
        return TrackingResult(success=True, tracking_id=tracking_id)

    async def get_social_traffic_report(
        self,
        date_range: str | None = None,
    ) -> SocialTrafficReport | None:
        # TODO: query the GA4 Data API once a property id is configured
        return SocialTrafficReport(
            date_range=date_range or DEFAULT_REPORT_RANGE,
            total_sessions=12543,
            social_sessions=3421,
            social_conversion_rate=2.4,
            top_social_sources=[
                SocialSource(source="instagram", sessions=1456, conversions=23),
                SocialSource(source="linkedin", sessions=987, conversions=31),
                SocialSource(source="tiktok", sessions=634, conversions=12),
                SocialSource(source="facebook", sessions=344, conversions=8),
            ],
            period_comparison=PeriodComparison(
                sessions_change="+12.3%",
                conversion_rate_change="+0.8%",
            ),
        )
