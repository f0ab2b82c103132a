import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway


class TwitterGateway(HttpPlatformGateway):
    """X (Twitter) API v2 gateway for text posts."""

    BASE_URL = "https://api.twitter.com/2"
    DISPLAY_NAME = "Twitter"

    @property
    def platform(self) -> Platform:
        return Platform.TWITTER

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        response = await client.post(
            f"{self.BASE_URL}/tweets",
            headers={**self.bearer(account), "Content-Type": "application/json"},
            json={"text": content.text},
        )
        data = self._parse(response)
        return self._require_id((data.get("data") or {}).get("id"))
