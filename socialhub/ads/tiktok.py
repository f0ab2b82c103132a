import json

import httpx

from ..domain.models import AdAccount, AdMetrics, CampaignData
from ..domain.ports import AdPlatform
from ..platforms.base import VendorRejection, parse_vendor_response
from .base import HttpAdPlatformGateway
from .date_range import resolve_window
from .units import to_float, to_int

REPORT_METRICS = ["spend", "clicks", "impressions", "ctr", "cpm", "conversion"]


class TikTokAdsGateway(HttpAdPlatformGateway):
    """
    TikTok Business API gateway.

    Reports need explicit start/end dates; rates are already percentages.
    Campaign listing is not integrated yet.
    """

    BASE_URL = "https://business-api.tiktok.com/open_api/v1.3"
    DISPLAY_NAME = "TikTok Ads"

    supports_campaigns = False

    @property
    def platform(self) -> AdPlatform:
        return AdPlatform.TIKTOK

    async def _fetch_metrics(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
        date_range: str,
    ) -> AdMetrics:
        window = resolve_window(date_range, self._today())
        response = await client.get(
            f"{self.BASE_URL}/report/integrated/get/",
            headers={"Access-Token": account.access_token},
            params={
                "advertiser_id": account.account_id,
                "report_type": "BASIC",
                "data_level": "AUCTION_ADVERTISER",
                "dimensions": json.dumps(["advertiser_id"]),
                "metrics": json.dumps(REPORT_METRICS),
                "start_date": window.start_iso,
                "end_date": window.end_iso,
            },
        )
        data = parse_vendor_response(response, self.default_error)
        if data.get("code") != 0:
            raise VendorRejection(data.get("message") or self.default_error)

        rows = (data.get("data") or {}).get("list") or [{}]
        metrics = rows[0].get("metrics") or {}
        return AdMetrics(
            spend=to_float(metrics.get("spend")),
            clicks=to_int(metrics.get("clicks")),
            impressions=to_int(metrics.get("impressions")),
            ctr=to_float(metrics.get("ctr")),
            cpm=to_float(metrics.get("cpm")),
            conversions=to_int(metrics.get("conversion", metrics.get("conversions"))),
            date_range=date_range,
        )

    async def _fetch_campaigns(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
    ) -> list[CampaignData]:
        return []
