import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway


class LinkedInGateway(HttpPlatformGateway):
    """LinkedIn API gateway for Company Page posts."""

    BASE_URL = "https://api.linkedin.com/v2"
    DISPLAY_NAME = "LinkedIn"

    @property
    def platform(self) -> Platform:
        return Platform.LINKEDIN

    def build_payload(self, account: SocialMediaAccount, content: PostContent) -> dict:
        share_content = {
            "shareCommentary": {"text": content.text},
            "shareMediaCategory": "NONE",
        }

        if content.image_urls:
            share_content.update(
                {
                    "shareMediaCategory": "IMAGE",
                    "media": [
                        {
                            "status": "READY",
                            "description": {"text": ""},
                            "media": url,
                            "title": {"text": ""},
                        }
                        for url in content.image_urls
                    ],
                }
            )

        return {
            "author": f"urn:li:organization:{account.account_id}",
            "lifecycleState": "PUBLISHED",
            "specificContent": {"com.linkedin.ugc.ShareContent": share_content},
            "visibility": {"com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC"},
        }

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        headers = {
            **self.bearer(account),
            "Content-Type": "application/json",
            "X-Restli-Protocol-Version": "2.0.0",
        }
        response = await client.post(
            f"{self.BASE_URL}/ugcPosts",
            headers=headers,
            json=self.build_payload(account, content),
        )
        data = self._parse(response)
        # The created URN is echoed in a header when the body is empty
        return self._require_id(data.get("id") or response.headers.get("x-restli-id"))

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict | None:
        return await self._fetch_json(
            account,
            f"{self.BASE_URL}/organizationalEntityShareStatistics",
            params={
                "q": "organizationalEntity",
                "organizationalEntity": f"urn:li:organization:{account.account_id}",
            },
            headers=self.bearer(account),
        )
