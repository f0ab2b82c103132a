"""
Application service for ad platform reporting.
"""

import asyncio

import structlog

from ...domain.models import AdAccount, AdMetrics, CampaignData, ConsolidatedMetrics
from ...domain.ports import canonical_ad_platform
from ...domain.result import ErrorKind
from ...infrastructure.adapters.gateway_registry import GatewayRegistry
from .dispatch import call_with_timeout

logger = structlog.get_logger()

DEFAULT_DATE_RANGE = "LAST_30_DAYS"
DEFAULT_DISPATCH_TIMEOUT_SECONDS = 30.0


def breakdown_key(platform: str) -> str:
    ad_platform = canonical_ad_platform(platform)
    return ad_platform.value if ad_platform else platform.strip().lower()


def consolidate(results: list[tuple[str, AdMetrics | None]]) -> ConsolidatedMetrics:
    """
    Combine per-account metrics into one summary.

    Accounts without metrics are ignored entirely: they add nothing to the
    sums and do not count toward the averages. With no metrics at all both
    averages are 0.
    """
    reported = [(platform, metrics) for platform, metrics in results if metrics is not None]
    summary = ConsolidatedMetrics()

    ctr_sum = 0.0
    cpm_sum = 0.0
    for platform, metrics in reported:
        summary.total_spend += metrics.spend
        summary.total_clicks += metrics.clicks
        summary.total_impressions += metrics.impressions
        summary.total_conversions += metrics.conversions
        ctr_sum += metrics.ctr
        cpm_sum += metrics.cpm
        summary.platform_breakdown[breakdown_key(platform)] = metrics

    if reported:
        summary.average_ctr = ctr_sum / len(reported)
        summary.average_cpm = cpm_sum / len(reported)

    return summary


class AdsService:
    """Dispatches ad reporting calls to the right ad platform gateway."""

    def __init__(
        self,
        registry: GatewayRegistry,
        dispatch_timeout: float = DEFAULT_DISPATCH_TIMEOUT_SECONDS,
    ) -> None:
        self._registry = registry
        self._dispatch_timeout = dispatch_timeout

    @property
    def platforms(self) -> list[str]:
        return sorted(key.value for key in self._registry.keys)

    async def get_account_metrics(
        self,
        account: AdAccount,
        date_range: str = DEFAULT_DATE_RANGE,
    ) -> AdMetrics | None:
        gateway = self._registry.resolve(account.platform)
        if gateway is None:
            logger.warning(
                "Unsupported ad platform",
                platform=account.platform,
                account_id=account.id,
                kind=ErrorKind.UNSUPPORTED.value,
            )
            return None

        outcome = await call_with_timeout(
            gateway.get_account_metrics(account, date_range),
            self._dispatch_timeout,
            platform=account.platform,
            account_id=account.id,
        )
        return outcome.value if outcome.ok else None

    async def get_campaigns(self, account: AdAccount) -> list[CampaignData]:
        """
        List campaigns for an account.

        TikTok campaign listing is not integrated; it returns an empty list
        even though TikTok metrics are supported.
        """
        gateway = self._registry.resolve(account.platform)
        if gateway is None:
            logger.warning(
                "Unsupported ad platform",
                platform=account.platform,
                account_id=account.id,
                kind=ErrorKind.UNSUPPORTED.value,
            )
            return []
        if not gateway.supports_campaigns:
            logger.info("Campaign listing not supported", platform=account.platform)
            return []

        outcome = await call_with_timeout(
            gateway.get_campaigns(account),
            self._dispatch_timeout,
            platform=account.platform,
            account_id=account.id,
        )
        return outcome.value_or([])

    async def get_consolidated_metrics(
        self,
        accounts: list[AdAccount],
        date_range: str = DEFAULT_DATE_RANGE,
    ) -> ConsolidatedMetrics:
        """Fetch metrics for all accounts concurrently and consolidate them."""
        metrics = await asyncio.gather(
            *(self.get_account_metrics(account, date_range) for account in accounts)
        )
        summary = consolidate(
            [(account.platform, m) for account, m in zip(accounts, metrics)]
        )

        logger.info(
            "Consolidated ad metrics",
            accounts=len(accounts),
            reported=len([m for m in metrics if m is not None]),
            total_spend=summary.total_spend,
        )
        return summary
