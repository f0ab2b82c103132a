import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway


class PinterestGateway(HttpPlatformGateway):
    """Pinterest API v5 gateway. Pins need an image; the account id is the board id."""

    BASE_URL = "https://api.pinterest.com/v5"
    DISPLAY_NAME = "Pinterest"

    @property
    def platform(self) -> Platform:
        return Platform.PINTEREST

    def check_content(self, content: PostContent) -> str | None:
        if not content.image_urls:
            return "Image required for Pinterest"
        return None

    def build_payload(self, account: SocialMediaAccount, content: PostContent) -> dict:
        return {
            "board_id": account.account_id,
            "title": content.text[:100],
            "description": content.text,
            "link": content.first_image,
            "media_source": {
                "source_type": "image_url",
                "url": content.first_image,
            },
        }

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        response = await client.post(
            f"{self.BASE_URL}/pins",
            headers={**self.bearer(account), "Content-Type": "application/json"},
            json=self.build_payload(account, content),
        )
        data = self._parse(response)
        return self._require_id(data.get("id"))
