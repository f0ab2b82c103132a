import json
from collections.abc import AsyncIterator
from datetime import timezone

import httpx

from ..domain.models import PostContent, SocialMediaAccount
from ..domain.ports import Platform
from .base import DEFAULT_TIMEOUT_SECONDS, ContentRejection, HttpPlatformGateway, VendorRejection

DEFAULT_CATEGORY_ID = "22"  # People & Blogs
DEFAULT_MAX_VIDEO_BYTES = 256 * 1024 * 1024


class YouTubeGateway(HttpPlatformGateway):
    """
    YouTube Data API v3 gateway.

    Uses the resumable upload protocol: the source video is downloaded from
    content.video_url, an upload session is opened with the video metadata,
    then the source body is relayed in a single PUT. Sources without a
    Content-Length, or larger than max_video_bytes, are refused before any
    upload request.
    """

    BASE_URL = "https://www.googleapis.com/youtube/v3"
    UPLOAD_URL = "https://www.googleapis.com/upload/youtube/v3/videos"
    DISPLAY_NAME = "YouTube"

    def __init__(
        self,
        max_video_bytes: int = DEFAULT_MAX_VIDEO_BYTES,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(timeout=timeout, transport=transport)
        self._max_video_bytes = max_video_bytes

    @property
    def platform(self) -> Platform:
        return Platform.YOUTUBE

    def check_content(self, content: PostContent) -> str | None:
        if not content.video_url:
            return "Video content required for YouTube"
        return None

    def build_metadata(self, content: PostContent) -> dict:
        status = {"privacyStatus": "public", "selfDeclaredMadeForKids": False}
        if content.scheduled_for:
            # Scheduled videos must stay private until publishAt
            publish_at = content.scheduled_for.astimezone(timezone.utc)
            status["privacyStatus"] = "private"
            status["publishAt"] = publish_at.strftime("%Y-%m-%dT%H:%M:%SZ")

        return {
            "snippet": {
                "title": content.text[:100],
                "description": content.text,
                "tags": list(content.hashtags),
                "categoryId": DEFAULT_CATEGORY_ID,
            },
            "status": status,
        }

    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        # Step 1: Open the source video; the body is relayed, never buffered
        async with client.stream(
            "GET",
            content.video_url,
            headers={"Accept-Encoding": "identity"},
            follow_redirects=True,
        ) as source:
            if not source.is_success:
                raise VendorRejection(f"Could not download video ({source.status_code})")
            size = self.declared_size(source)
            content_type = source.headers.get("content-type", "video/*")

            # Step 2: Open a resumable upload session
            init_response = await client.post(
                self.UPLOAD_URL,
                params={"uploadType": "resumable", "part": "snippet,status"},
                headers={
                    **self.bearer(account),
                    "Content-Type": "application/json; charset=UTF-8",
                    "X-Upload-Content-Length": str(size),
                    "X-Upload-Content-Type": content_type,
                },
                content=json.dumps(self.build_metadata(content)),
            )
            self._parse(init_response)
            upload_url = init_response.headers.get("location")
            if not upload_url:
                raise VendorRejection("YouTube did not return an upload URL")

            # Step 3: Send the bytes
            upload_response = await client.put(
                upload_url,
                content=self._relay(source, size),
                headers={
                    **self.bearer(account),
                    "Content-Type": content_type,
                    "Content-Length": str(size),
                },
            )
        data = self._parse(upload_response)
        return self._require_id(data.get("id"))

    def declared_size(self, source: httpx.Response) -> int:
        """Video size from the source's Content-Length, checked against the cap."""
        try:
            size = int(source.headers["content-length"])
        except (KeyError, ValueError):
            raise ContentRejection("Video size unknown: source sent no Content-Length") from None
        if size > self._max_video_bytes:
            raise ContentRejection(f"Video exceeds maximum size of {self._max_video_bytes} bytes")
        return size

    async def _relay(self, source: httpx.Response, size: int) -> AsyncIterator[bytes]:
        sent = 0
        async for chunk in source.aiter_bytes():
            sent += len(chunk)
            if sent > size:
                raise ContentRejection("Video source sent more bytes than it declared")
            yield chunk

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict | None:
        """Channel statistics (subscribers, views, video count)."""
        return await self._fetch_json(
            account,
            f"{self.BASE_URL}/channels",
            params={"part": "statistics", "id": account.account_id},
            headers=self.bearer(account),
        )
