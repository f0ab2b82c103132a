import json
from datetime import UTC, datetime

import httpx
import pytest

from socialhub.domain.models import PostContent, PostResult
from socialhub.domain.result import ErrorKind
from socialhub.platforms import (
    BlueskyGateway,
    GoogleBusinessGateway,
    LinkedInGateway,
    MetaGateway,
    PinterestGateway,
    TikTokGateway,
    TwitchGateway,
    TwitterGateway,
    YouTubeGateway,
)
from socialhub.platforms.base import ContentRejection
from socialhub.platforms.bluesky import hashtag_facets
from socialhub.platforms.twitch import ANNOUNCEMENT_POST_ID


def recording_transport(handler, requests: list) -> httpx.MockTransport:
    def _handle(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    return httpx.MockTransport(_handle)


class TestMetaGateway:
    @pytest.mark.asyncio
    async def test_publish_to_facebook_page_feed(self, make_account, image_content):
        requests = []
        gateway = MetaGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"id": "page_1_post_9"}), requests)
        )

        result = await gateway.publish_post(make_account("facebook", "page_1"), image_content)

        assert result.success is True
        assert result.post_id == "page_1_post_9"
        assert result.platform == "facebook"
        assert requests[0].url.path == "/v18.0/page_1/feed"
        body = json.loads(requests[0].content)
        assert body["message"] == "New arrivals"
        assert body["url"] == "https://cdn.example.com/a.jpg"
        assert "published" not in body

    @pytest.mark.asyncio
    async def test_instagram_uses_media_edge(self, make_account, image_content):
        requests = []
        gateway = MetaGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"id": "ig_1"}), requests)
        )

        result = await gateway.publish_post(make_account("instagram", "ig_user"), image_content)

        assert result.success is True
        assert requests[0].url.path == "/v18.0/ig_user/media"

    @pytest.mark.asyncio
    async def test_scheduled_post_is_unpublished(self, make_account):
        requests = []
        scheduled = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)
        gateway = MetaGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"post_id": "p_2"}), requests)
        )

        result = await gateway.publish_post(
            make_account("facebook"), PostContent(text="Later", scheduled_for=scheduled)
        )

        body = json.loads(requests[0].content)
        assert result.post_id == "p_2"
        assert body["scheduled_publish_time"] == int(scheduled.timestamp())
        assert body["published"] is False

    @pytest.mark.asyncio
    async def test_account_metrics(self, make_account):
        requests = []
        insights = {"data": [{"name": "impressions", "values": [{"value": 10}]}]}
        gateway = MetaGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json=insights), requests)
        )

        metrics = await gateway.get_account_metrics(make_account("facebook", "page_1"))

        assert metrics == insights
        assert requests[0].url.params["metric"] == "impressions,reach,engagement"

    @pytest.mark.asyncio
    async def test_account_metrics_none_on_error(self, make_account):
        gateway = MetaGateway(
            transport=httpx.MockTransport(
                lambda r: httpx.Response(400, json={"error": {"message": "Unsupported get request"}})
            )
        )

        assert await gateway.get_account_metrics(make_account("facebook")) is None


class TestLinkedInGateway:
    @pytest.mark.asyncio
    async def test_publish_with_images(self, make_account, image_content):
        requests = []
        gateway = LinkedInGateway(
            transport=recording_transport(lambda r: httpx.Response(201, json={"id": "urn:li:share:1"}), requests)
        )

        result = await gateway.publish_post(make_account("linkedin", "42"), image_content)

        assert result.post_id == "urn:li:share:1"
        request = requests[0]
        assert request.headers["X-Restli-Protocol-Version"] == "2.0.0"
        assert request.headers["Authorization"] == "Bearer test-token"
        body = json.loads(request.content)
        assert body["author"] == "urn:li:organization:42"
        share = body["specificContent"]["com.linkedin.ugc.ShareContent"]
        assert share["shareMediaCategory"] == "IMAGE"
        assert [m["media"] for m in share["media"]] == list(image_content.image_urls)

    @pytest.mark.asyncio
    async def test_post_id_from_header(self, make_account, text_content):
        gateway = LinkedInGateway(
            transport=httpx.MockTransport(
                lambda r: httpx.Response(201, headers={"x-restli-id": "urn:li:share:77"})
            )
        )

        result = await gateway.publish_post(make_account("linkedin"), text_content)

        assert result.success is True
        assert result.post_id == "urn:li:share:77"


class TestTikTokGateway:
    @pytest.mark.asyncio
    async def test_requires_video_without_network_call(self, make_account, image_content):
        requests = []
        gateway = TikTokGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"share_id": "x"}), requests)
        )

        result = await gateway.publish_post(make_account("tiktok"), image_content)

        assert result.success is False
        assert result.error == "Video content required for TikTok"
        assert requests == []

    @pytest.mark.asyncio
    async def test_publish_video(self, make_account, video_content):
        requests = []
        gateway = TikTokGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"share_id": "share_9"}), requests)
        )

        result = await gateway.publish_post(make_account("tiktok"), video_content)

        assert result.post_id == "share_9"
        body = json.loads(requests[0].content)
        assert body["video_url"] == video_content.video_url
        assert body["hashtags"] == ["bts", "studio"]


class TestYouTubeGateway:
    @pytest.mark.asyncio
    async def test_requires_video(self, make_account, text_content):
        requests = []
        gateway = YouTubeGateway(transport=recording_transport(lambda r: httpx.Response(200), requests))

        result = await gateway.publish_post(make_account("youtube"), text_content)

        assert result.error == "Video content required for YouTube"
        assert requests == []

    @pytest.mark.asyncio
    async def test_resumable_upload(self, make_account, video_content):
        requests = []
        session_url = "https://www.googleapis.com/upload/youtube/v3/videos?upload_id=abc"

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, content=b"video-bytes", headers={"content-type": "video/mp4"})
            if request.method == "POST":
                return httpx.Response(200, headers={"location": session_url})
            return httpx.Response(200, json={"id": "yt_video_1"})

        gateway = YouTubeGateway(transport=recording_transport(handler, requests))

        result = await gateway.publish_post(make_account("youtube"), video_content)

        assert result.success is True
        assert result.post_id == "yt_video_1"
        assert [r.method for r in requests] == ["GET", "POST", "PUT"]
        init = requests[1]
        assert init.url.params["uploadType"] == "resumable"
        assert init.headers["X-Upload-Content-Length"] == str(len(b"video-bytes"))
        metadata = json.loads(init.content)
        assert metadata["snippet"]["title"] == "Behind the scenes"
        assert metadata["snippet"]["tags"] == ["bts", "studio"]
        assert metadata["status"]["privacyStatus"] == "public"
        assert requests[2].content == b"video-bytes"
        assert requests[2].headers["Content-Length"] == str(len(b"video-bytes"))

    @pytest.mark.asyncio
    async def test_missing_upload_location(self, make_account, video_content):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, content=b"v")
            return httpx.Response(200)

        gateway = YouTubeGateway(transport=httpx.MockTransport(handler))

        result = await gateway.publish_post(make_account("youtube"), video_content)

        assert result.success is False
        assert result.error == "YouTube did not return an upload URL"

    @pytest.mark.asyncio
    async def test_oversized_source_is_refused_before_upload(self, make_account, video_content):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET":
                return httpx.Response(200, content=b"x" * 64, headers={"content-type": "video/mp4"})
            return httpx.Response(200, headers={"location": "https://upload.example.com/s"})

        gateway = YouTubeGateway(max_video_bytes=16, transport=recording_transport(handler, requests))

        outcome = await gateway.try_publish(make_account("youtube"), video_content)

        assert outcome.ok is False
        assert outcome.kind == ErrorKind.PRECONDITION
        assert outcome.error == "Video exceeds maximum size of 16 bytes"
        assert [r.method for r in requests] == ["GET"]
        assert requests[0].headers["Accept-Encoding"] == "identity"

    @pytest.mark.asyncio
    async def test_oversized_source_gives_failed_result(self, make_account, video_content):
        gateway = YouTubeGateway(
            max_video_bytes=4,
            transport=httpx.MockTransport(lambda r: httpx.Response(200, content=b"too-large")),
        )

        result = await gateway.publish_post(make_account("youtube"), video_content)

        assert result == PostResult.failed("youtube", "Video exceeds maximum size of 4 bytes")

    @pytest.mark.parametrize("headers", [{}, {"content-length": "unknown"}])
    def test_source_size_must_be_declared(self, headers):
        gateway = YouTubeGateway()

        with pytest.raises(ContentRejection):
            gateway.declared_size(httpx.Response(200, headers=headers))

    def test_scheduled_video_is_private(self):
        gateway = YouTubeGateway()
        content = PostContent(
            text="x" * 150,
            video_url="https://cdn.example.com/v.mp4",
            scheduled_for=datetime(2030, 1, 2, 3, 4, 5, tzinfo=UTC),
        )

        metadata = gateway.build_metadata(content)

        assert len(metadata["snippet"]["title"]) == 100
        assert metadata["status"]["privacyStatus"] == "private"
        assert metadata["status"]["publishAt"] == "2030-01-02T03:04:05Z"


class TestTwitterGateway:
    @pytest.mark.asyncio
    async def test_publish_text(self, make_account, image_content):
        requests = []
        gateway = TwitterGateway(
            transport=recording_transport(
                lambda r: httpx.Response(201, json={"data": {"id": "1789", "text": "New arrivals"}}), requests
            )
        )

        result = await gateway.publish_post(make_account("x"), image_content)

        assert result.success is True
        assert result.post_id == "1789"
        assert result.platform == "x"
        assert json.loads(requests[0].content) == {"text": "New arrivals"}


class TestPinterestGateway:
    @pytest.mark.asyncio
    async def test_requires_image(self, make_account, text_content):
        gateway = PinterestGateway(transport=httpx.MockTransport(lambda r: httpx.Response(201)))

        result = await gateway.publish_post(make_account("pinterest"), text_content)

        assert result.error == "Image required for Pinterest"

    @pytest.mark.asyncio
    async def test_publish_pin(self, make_account, image_content):
        requests = []
        gateway = PinterestGateway(
            transport=recording_transport(lambda r: httpx.Response(201, json={"id": "pin_5"}), requests)
        )

        result = await gateway.publish_post(make_account("pinterest", "board_3"), image_content)

        assert result.post_id == "pin_5"
        body = json.loads(requests[0].content)
        assert body["board_id"] == "board_3"
        assert body["media_source"] == {"source_type": "image_url", "url": "https://cdn.example.com/a.jpg"}


class TestGoogleBusinessGateway:
    @pytest.mark.asyncio
    async def test_publish_local_post(self, make_account, image_content):
        requests = []
        name = "accounts/loc1/locations/loc1/localPosts/99"
        gateway = GoogleBusinessGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"name": name}), requests)
        )

        result = await gateway.publish_post(make_account("google_business_profile", "loc1"), image_content)

        assert result.post_id == name
        body = json.loads(requests[0].content)
        assert body["summary"] == "New arrivals"
        assert body["media"][0] == {"mediaFormat": "PHOTO", "sourceUrl": "https://cdn.example.com/a.jpg"}


class TestBlueskyGateway:
    @pytest.mark.asyncio
    async def test_publish_record(self, make_account):
        requests = []
        uri = "at://did:plc:abc/app.bsky.feed.post/3k"
        gateway = BlueskyGateway(
            transport=recording_transport(lambda r: httpx.Response(200, json={"uri": uri, "cid": "c"}), requests)
        )
        content = PostContent(text="Hello #sky", hashtags=("sky",))

        result = await gateway.publish_post(make_account("bluesky", "did:plc:abc"), content)

        assert result.post_id == uri
        body = json.loads(requests[0].content)
        assert body["repo"] == "did:plc:abc"
        assert body["record"]["$type"] == "app.bsky.feed.post"
        assert body["record"]["facets"][0]["features"][0]["tag"] == "sky"

    def test_facets_use_byte_offsets(self):
        text = "Café #news"

        facets = hashtag_facets(text, ["news"])

        # "Café " is 6 bytes in UTF-8
        assert facets[0]["index"] == {"byteStart": 6, "byteEnd": 11}

    def test_facets_skip_absent_tags(self):
        assert hashtag_facets("No tags here", ["missing"]) == []


class TestTwitchGateway:
    @pytest.mark.asyncio
    async def test_announcement(self, make_account, text_content):
        requests = []
        gateway = TwitchGateway(
            client_id="client-abc",
            transport=recording_transport(lambda r: httpx.Response(204), requests),
        )

        result = await gateway.publish_post(make_account("twitch", "b_1"), text_content)

        assert result.success is True
        assert result.post_id == ANNOUNCEMENT_POST_ID
        request = requests[0]
        assert request.headers["Client-Id"] == "client-abc"
        assert request.url.params["broadcaster_id"] == "b_1"
        assert request.url.params["moderator_id"] == "b_1"

    @pytest.mark.asyncio
    async def test_channel_info(self, make_account):
        channel = {"data": [{"broadcaster_id": "b_1", "title": "Live"}]}
        gateway = TwitchGateway(
            client_id="client-abc",
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=channel)),
        )

        assert await gateway.get_channel_info(make_account("twitch", "b_1")) == channel
