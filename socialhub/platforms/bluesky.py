from datetime import datetime, timezone

import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import HttpPlatformGateway

TAG_FACET_TYPE = "app.bsky.richtext.facet#tag"


def hashtag_facets(text: str, hashtags: tuple[str, ...] | list[str]) -> list[dict]:
    """
    Build rich-text tag facets for hashtags that appear in the text.

    Facet indices are UTF-8 byte offsets, not character offsets.
    """
    facets = []
    for tag in hashtags:
        tag_text = tag if tag.startswith("#") else f"#{tag}"
        index = text.find(tag_text)
        if index == -1:
            continue
        byte_start = len(text[:index].encode("utf-8"))
        facets.append(
            {
                "index": {
                    "byteStart": byte_start,
                    "byteEnd": byte_start + len(tag_text.encode("utf-8")),
                },
                "features": [{"$type": TAG_FACET_TYPE, "tag": tag_text.lstrip("#")}],
            }
        )
    return facets


class BlueskyGateway(HttpPlatformGateway):
    """Bluesky (AT Protocol) gateway. The account id is the repo DID or handle."""

    BASE_URL = "https://bsky.social/xrpc"
    DISPLAY_NAME = "Bluesky"

    @property
    def platform(self) -> Platform:
        return Platform.BLUESKY

    def build_record(self, account: SocialMediaAccount, content: PostContent) -> dict:
        record = {
            "$type": "app.bsky.feed.post",
            "text": content.text,
            "createdAt": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }
        facets = hashtag_facets(content.text, content.hashtags)
        if facets:
            record["facets"] = facets
        return {
            "repo": account.account_id,
            "collection": "app.bsky.feed.post",
            "record": record,
        }

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        response = await client.post(
            f"{self.BASE_URL}/com.atproto.repo.createRecord",
            headers={**self.bearer(account), "Content-Type": "application/json"},
            json=self.build_record(account, content),
        )
        data = self._parse(response)
        return self._require_id(data.get("uri"))
