import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway


class GoogleBusinessGateway(HttpPlatformGateway):
    """Google Business Profile gateway for local posts."""

    BASE_URL = "https://mybusinessbusinessinformation.googleapis.com/v1"
    DISPLAY_NAME = "Google Business Profile"

    @property
    def platform(self) -> Platform:
        return Platform.GOOGLE_BUSINESS

    def build_payload(self, content: PostContent) -> dict:
        payload = {"summary": content.text}
        if content.image_urls:
            payload["media"] = [
                {"mediaFormat": "PHOTO", "sourceUrl": url} for url in content.image_urls
            ]
        return payload

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        url = (
            f"{self.BASE_URL}/accounts/{account.account_id}"
            f"/locations/{account.account_id}/localPosts"
        )
        response = await client.post(
            url,
            headers={**self.bearer(account), "Content-Type": "application/json"},
            json=self.build_payload(content),
        )
        data = self._parse(response)
        return self._require_id(data.get("name"))
