import re

import httpx

from ..domain.models import AdAccount, AdMetrics, CampaignData, CampaignStatus
from ..domain.ports import AdPlatform
from ..platforms.base import (
    DEFAULT_TIMEOUT_SECONDS,
    VendorRejection,
    extract_vendor_error,
    parse_vendor_response,
)
from .base import HttpAdPlatformGateway
from .date_range import relative_window_days, window_for
from .units import fraction_to_percent, micros_to_units, to_int

# GAQL predefined date ranges, e.g. THIS_MONTH or LAST_BUSINESS_WEEK
DURING_LABEL = re.compile(r"[A-Z_]+")

METRICS_QUERY = """
SELECT
  metrics.cost_micros,
  metrics.clicks,
  metrics.impressions,
  metrics.ctr,
  metrics.average_cpm,
  metrics.conversions
FROM customer
WHERE {date_filter}
"""

CAMPAIGNS_QUERY = """
SELECT
  campaign.id,
  campaign.name,
  campaign.status,
  campaign.start_date,
  campaign.end_date,
  metrics.cost_micros,
  metrics.clicks,
  metrics.impressions,
  metrics.ctr
FROM campaign
"""


class GoogleAdsGateway(HttpAdPlatformGateway):
    """
    Google Ads API gateway using GAQL over searchStream.

    Money is reported in micros and ctr as a fraction; both are normalized
    to currency units and percent.
    """

    BASE_URL = "https://googleads.googleapis.com/v15"
    DISPLAY_NAME = "Google Ads"

    def __init__(
        self,
        developer_token: str,
        login_customer_id: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport, **kwargs)
        self._developer_token = developer_token
        self._login_customer_id = login_customer_id

    @property
    def platform(self) -> AdPlatform:
        return AdPlatform.GOOGLE

    def _headers(self, account: AdAccount) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {account.access_token}",
            "Content-Type": "application/json",
            "developer-token": self._developer_token,
        }
        if self._login_customer_id:
            headers["login-customer-id"] = self._login_customer_id
        return headers

    def check_date_range(self, date_range: str) -> str | None:
        if relative_window_days(date_range) is None and not DURING_LABEL.fullmatch(date_range):
            return f"Unsupported date range: {date_range}"
        return None

    def date_filter(self, date_range: str) -> str:
        days = relative_window_days(date_range)
        if days is None:
            if not DURING_LABEL.fullmatch(date_range):
                raise ValueError(f"Unsupported date range: {date_range}")
            return f"segments.date DURING {date_range}"
        window = window_for(days, self._today())
        return f"segments.date BETWEEN '{window.start_iso}' AND '{window.end_iso}'"

    async def _search(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
        query: str,
    ) -> list[dict]:
        response = await client.post(
            f"{self.BASE_URL}/customers/{account.account_id}/googleAds:searchStream",
            headers=self._headers(account),
            json={"query": query},
        )
        data = parse_vendor_response(response, self.default_error)

        # searchStream answers with a list of batches; search with a single object
        batches = data if isinstance(data, list) else [data]
        results = []
        for batch in batches:
            if isinstance(batch, dict) and batch.get("error"):
                raise VendorRejection(extract_vendor_error(batch, self.default_error))
            results.extend(batch.get("results") or [])
        return results

    async def _fetch_metrics(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
        date_range: str,
    ) -> AdMetrics:
        query = METRICS_QUERY.format(date_filter=self.date_filter(date_range))
        results = await self._search(client, account, query)
        metrics = (results[0].get("metrics") if results else None) or {}
        return AdMetrics(
            spend=micros_to_units(metrics.get("costMicros")),
            clicks=to_int(metrics.get("clicks")),
            impressions=to_int(metrics.get("impressions")),
            ctr=fraction_to_percent(metrics.get("ctr")),
            cpm=micros_to_units(metrics.get("averageCpm")),
            conversions=to_int(metrics.get("conversions")),
            date_range=date_range,
        )

    async def _fetch_campaigns(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
    ) -> list[CampaignData]:
        results = await self._search(client, account, CAMPAIGNS_QUERY)
        campaigns = []
        for row in results:
            campaign = row.get("campaign") or {}
            metrics = row.get("metrics") or {}
            campaigns.append(
                CampaignData(
                    id=str(campaign.get("id", "")),
                    name=campaign.get("name", ""),
                    status=CampaignStatus.from_vendor(campaign.get("status")),
                    spend=micros_to_units(metrics.get("costMicros")),
                    clicks=to_int(metrics.get("clicks")),
                    impressions=to_int(metrics.get("impressions")),
                    ctr=fraction_to_percent(metrics.get("ctr")),
                    start_date=campaign.get("startDate"),
                    end_date=campaign.get("endDate"),
                )
            )
        return campaigns
