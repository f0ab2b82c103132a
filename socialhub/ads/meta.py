import json

import httpx

from ..domain.models import AdAccount, AdMetrics, CampaignData, CampaignStatus
from ..domain.ports import AdPlatform
from ..platforms.base import parse_vendor_response
from .base import HttpAdPlatformGateway
from .date_range import relative_window_days, window_for
from .units import sum_action_values, to_float, to_int

INSIGHT_FIELDS = "spend,clicks,impressions,ctr,cpm,conversions"


class MetaAdsGateway(HttpAdPlatformGateway):
    """
    Meta Marketing API gateway (Facebook and Instagram ads).

    Spend and cpm come back in account currency and ctr as a percentage,
    so only string parsing is needed.
    """

    BASE_URL = "https://graph.facebook.com/v18.0"
    DISPLAY_NAME = "Meta Ads"

    @property
    def platform(self) -> AdPlatform:
        return AdPlatform.META

    def date_params(self, date_range: str) -> dict[str, str]:
        days = relative_window_days(date_range)
        if days is None:
            return {"date_preset": date_range}
        window = window_for(days, self._today())
        return {"time_range": json.dumps({"since": window.start_iso, "until": window.end_iso})}

    async def _fetch_metrics(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
        date_range: str,
    ) -> AdMetrics:
        response = await client.get(
            f"{self.BASE_URL}/act_{account.account_id}/insights",
            params={
                "fields": INSIGHT_FIELDS,
                **self.date_params(date_range),
                "access_token": account.access_token,
            },
        )
        data = parse_vendor_response(response, self.default_error)
        rows = data.get("data") or [{}]
        return self.to_metrics(rows[0], date_range)

    @staticmethod
    def to_metrics(row: dict, date_range: str) -> AdMetrics:
        return AdMetrics(
            spend=to_float(row.get("spend")),
            clicks=to_int(row.get("clicks")),
            impressions=to_int(row.get("impressions")),
            ctr=to_float(row.get("ctr")),
            cpm=to_float(row.get("cpm")),
            conversions=sum_action_values(row.get("conversions")),
            date_range=date_range,
        )

    async def _fetch_campaigns(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
    ) -> list[CampaignData]:
        response = await client.get(
            f"{self.BASE_URL}/act_{account.account_id}/campaigns",
            params={
                "fields": "id,name,status,start_time,stop_time,insights{spend,clicks,impressions,ctr}",
                "access_token": account.access_token,
            },
        )
        data = parse_vendor_response(response, self.default_error)

        campaigns = []
        for campaign in data.get("data") or []:
            insights = ((campaign.get("insights") or {}).get("data") or [{}])[0]
            campaigns.append(
                CampaignData(
                    id=str(campaign["id"]),
                    name=campaign.get("name", ""),
                    status=CampaignStatus.from_vendor(campaign.get("status")),
                    spend=to_float(insights.get("spend")),
                    clicks=to_int(insights.get("clicks")),
                    impressions=to_int(insights.get("impressions")),
                    ctr=to_float(insights.get("ctr")),
                    start_date=campaign.get("start_time"),
                    end_date=campaign.get("stop_time"),
                )
            )
        return campaigns
