import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import DEFAULT_TIMEOUT_SECONDS, HttpPlatformGateway

ANNOUNCEMENT_POST_ID = "twitch_announcement"


class TwitchGateway(HttpPlatformGateway):
    """
    Twitch Helix gateway.

    Twitch has no feed posts; content is sent as a chat announcement on the
    broadcaster's channel. Announcements have no id, so a fixed marker id is
    reported on success.
    """

    BASE_URL = "https://api.twitch.tv/helix"
    DISPLAY_NAME = "Twitch"

    def __init__(
        self,
        client_id: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport)
        self._client_id = client_id

    @property
    def platform(self) -> Platform:
        return Platform.TWITCH

    def _headers(self, account: SocialMediaAccount) -> dict[str, str]:
        return {**self.bearer(account), "Client-Id": self._client_id}

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        response = await client.post(
            f"{self.BASE_URL}/chat/announcements",
            params={
                "broadcaster_id": account.account_id,
                "moderator_id": account.account_id,
            },
            headers={**self._headers(account), "Content-Type": "application/json"},
            json={"message": content.text, "color": "primary"},
        )
        # Success is 204 No Content
        self._parse(response)
        return ANNOUNCEMENT_POST_ID

    async def get_channel_info(self, account: SocialMediaAccount) -> dict | None:
        return await self._fetch_json(
            account,
            f"{self.BASE_URL}/channels",
            params={"broadcaster_id": account.account_id},
            headers=self._headers(account),
        )

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict | None:
        return await self.get_channel_info(account)
