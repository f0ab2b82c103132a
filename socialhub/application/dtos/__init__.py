from .ads_dto import (
    AdAccountDTO,
    AdMetricsDTO,
    AdMetricsRequestDTO,
    CampaignDTO,
    CampaignsRequestDTO,
    ConsolidatedMetricsDTO,
    ConsolidatedRequestDTO,
)
from .analytics_dto import SocialTrafficReportDTO, TrackingResultDTO, TrackRequestDTO
from .publishing_dto import (
    PostContentDTO,
    PostResultDTO,
    PublishRequestDTO,
    SocialMediaAccountDTO,
    SocialMetricsRequestDTO,
)

__all__ = [
    "AdAccountDTO",
    "AdMetricsDTO",
    "AdMetricsRequestDTO",
    "CampaignDTO",
    "CampaignsRequestDTO",
    "ConsolidatedMetricsDTO",
    "ConsolidatedRequestDTO",
    "PostContentDTO",
    "PostResultDTO",
    "PublishRequestDTO",
    "SocialMediaAccountDTO",
    "SocialMetricsRequestDTO",
    "SocialTrafficReportDTO",
    "TrackRequestDTO",
    "TrackingResultDTO",
]
