import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway


class TikTokGateway(HttpPlatformGateway):
    """TikTok share API gateway. Video only."""

    BASE_URL = "https://open-api.tiktok.com/share"
    DISPLAY_NAME = "TikTok"

    @property
    def platform(self) -> Platform:
        return Platform.TIKTOK

    def check_content(self, content: PostContent) -> str | None:
        if not content.video_url:
            return "Video content required for TikTok"
        return None

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        response = await client.post(
            f"{self.BASE_URL}/video/upload/",
            headers={**self.bearer(account), "Content-Type": "application/json"},
            json={
                "video_url": content.video_url,
                "caption": content.text,
                "hashtags": list(content.hashtags),
            },
        )
        data = self._parse(response)
        return self._require_id(data.get("share_id"))
