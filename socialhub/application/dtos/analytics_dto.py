"""Attribution DTOs (camelCase on the wire)."""

from pydantic import Field

from ...domain.models import SocialTrafficReport, TrackingResult
from .publishing_dto import CamelModel


class TrackRequestDTO(CamelModel):
    post_id: str = Field(..., min_length=1)
    platform: str = Field(..., min_length=1)
    website_url: str


class TrackingResultDTO(CamelModel):
    success: bool
    tracking_id: str | None = None
    error: str | None = None

    @classmethod
    def from_domain(cls, result: TrackingResult) -> "TrackingResultDTO":
        return cls(success=result.success, tracking_id=result.tracking_id, error=result.error)


class SocialSourceDTO(CamelModel):
    source: str
    sessions: int
    conversions: int


class PeriodComparisonDTO(CamelModel):
    sessions_change: str
    conversion_rate_change: str


class SocialTrafficReportDTO(CamelModel):
    date_range: str
    total_sessions: int
    social_sessions: int
    social_conversion_rate: float
    top_social_sources: list[SocialSourceDTO]
    period_comparison: PeriodComparisonDTO

    @classmethod
    def from_domain(cls, report: SocialTrafficReport) -> "SocialTrafficReportDTO":
        return cls(
            date_range=report.date_range,
            total_sessions=report.total_sessions,
            social_sessions=report.social_sessions,
            social_conversion_rate=report.social_conversion_rate,
            top_social_sources=[
                SocialSourceDTO(source=s.source, sessions=s.sessions, conversions=s.conversions)
                for s in report.top_social_sources
            ],
            period_comparison=PeriodComparisonDTO(
                sessions_change=report.period_comparison.sessions_change,
                conversion_rate_change=report.period_comparison.conversion_rate_change,
            ),
        )
