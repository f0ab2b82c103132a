"""Ad reporting DTOs (camelCase on the wire)."""

from pydantic import Field

from ...domain.models import AdAccount, AdMetrics, CampaignData, ConsolidatedMetrics
from .publishing_dto import CamelModel


class AdAccountDTO(CamelModel):
    id: str
    platform: str = Field(..., min_length=1)
    account_id: str
    account_name: str
    access_token: str = Field(..., repr=False)
    currency: str = "USD"

    def to_domain(self) -> AdAccount:
        return AdAccount(
            id=self.id,
            platform=self.platform,
            account_id=self.account_id,
            account_name=self.account_name,
            access_token=self.access_token,
            currency=self.currency,
        )


class AdMetricsRequestDTO(CamelModel):
    account: AdAccountDTO
    date_range: str | None = None


class CampaignsRequestDTO(CamelModel):
    account: AdAccountDTO


class ConsolidatedRequestDTO(CamelModel):
    accounts: list[AdAccountDTO]
    date_range: str | None = None


class AdMetricsDTO(CamelModel):
    spend: float
    clicks: int
    impressions: int
    ctr: float
    cpm: float
    conversions: int
    date_range: str

    @classmethod
    def from_domain(cls, metrics: AdMetrics) -> "AdMetricsDTO":
        return cls(
            spend=metrics.spend,
            clicks=metrics.clicks,
            impressions=metrics.impressions,
            ctr=metrics.ctr,
            cpm=metrics.cpm,
            conversions=metrics.conversions,
            date_range=metrics.date_range,
        )


class CampaignDTO(CamelModel):
    id: str
    name: str
    status: str
    spend: float
    clicks: int
    impressions: int
    ctr: float
    start_date: str | None = None
    end_date: str | None = None

    @classmethod
    def from_domain(cls, campaign: CampaignData) -> "CampaignDTO":
        return cls(
            id=campaign.id,
            name=campaign.name,
            status=campaign.status.value,
            spend=campaign.spend,
            clicks=campaign.clicks,
            impressions=campaign.impressions,
            ctr=campaign.ctr,
            start_date=campaign.start_date,
            end_date=campaign.end_date,
        )


class ConsolidatedMetricsDTO(CamelModel):
    total_spend: float
    total_clicks: int
    total_impressions: int
    average_ctr: float
    average_cpm: float
    total_conversions: int
    platform_breakdown: dict[str, AdMetricsDTO]

    @classmethod
    def from_domain(cls, summary: ConsolidatedMetrics) -> "ConsolidatedMetricsDTO":
        return cls(
            total_spend=summary.total_spend,
            total_clicks=summary.total_clicks,
            total_impressions=summary.total_impressions,
            average_ctr=summary.average_ctr,
            average_cpm=summary.average_cpm,
            total_conversions=summary.total_conversions,
            platform_breakdown={
                platform: AdMetricsDTO.from_domain(metrics)
                for platform, metrics in summary.platform_breakdown.items()
            },
        )
