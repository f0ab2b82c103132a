import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway


class MetaGateway(HttpPlatformGateway):
    """Facebook Graph API gateway for Facebook Pages and Instagram accounts."""

    BASE_URL = "https://graph.facebook.com/v18.0"
    DISPLAY_NAME = "Facebook"

    @property
    def platform(self) -> Platform:
        return Platform.META

    def build_payload(self, account: SocialMediaAccount, content: PostContent) -> dict:
        payload = {
            "message": content.text,
            "access_token": account.access_token,
        }
        if content.first_image:
            payload["url"] = content.first_image
        if content.scheduled_for:
            payload["scheduled_publish_time"] = int(content.scheduled_for.timestamp())
            payload["published"] = False
        return payload

    def endpoint(self, account: SocialMediaAccount) -> str:
        edge = "media" if account.platform.strip().lower() == "instagram" else "feed"
        return f"{self.BASE_URL}/{account.account_id}/{edge}"

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        response = await client.post(
            self.endpoint(account),
            json=self.build_payload(account, content),
        )
        data = self._parse(response)
        return self._require_id(data.get("id") or data.get("post_id"))

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict | None:
        """Page/account insights: impressions, reach, engagement."""
        return await self._fetch_json(
            account,
            f"{self.BASE_URL}/{account.account_id}/insights",
            params={
                "metric": "impressions,reach,engagement",
                "access_token": account.access_token,
            },
        )
