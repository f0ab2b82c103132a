"""
Outbound port for ad platform reporting.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..models import AdAccount, AdMetrics, CampaignData


class AdPlatform(str, Enum):
    """Supported ad platforms."""

    META = "meta"
    GOOGLE = "google"
    TIKTOK = "tiktok"


def canonical_ad_platform(name: str) -> AdPlatform | None:
    try:
        return AdPlatform(name.strip().lower())
    except ValueError:
        return None


class AdPlatformGateway(ABC):
    """
    Outbound port for one ad platform.

    get_account_metrics returns None and get_campaigns an empty list on any
    failure; neither raises.
    """

    # Platforms without a campaign listing integration set this to False
    supports_campaigns: bool = True

    @property
    @abstractmethod
    def platform(self) -> AdPlatform:
        ...

    @abstractmethod
    async def get_account_metrics(
        self,
        account: AdAccount,
        date_range: str,
    ) -> AdMetrics | None:
        """Fetch account-level metrics for one date window."""
        ...

    async def get_campaigns(self, account: AdAccount) -> list[CampaignData]:
        """List campaigns with their lifetime metrics."""
        return []
