import pytest

from socialhub.ads import GoogleAdsGateway, MetaAdsGateway, TikTokAdsGateway
from socialhub.config import Settings
from socialhub.domain.ports import AdPlatform, Platform
from socialhub.infrastructure.adapters import ADDITIONAL_PLATFORMS, CORE_PLATFORMS, GatewayFactory
from socialhub.platforms import MetaGateway, ThreadsSimulatorGateway, TwitchGateway, TwitterGateway, YouTubeGateway


class TestGatewayFactory:
    @pytest.fixture
    def factory(self):
        return GatewayFactory(Settings(twitch_client_id="twitch-client", google_ads_developer_token="dev"))

    def test_core_registry(self, factory):
        registry = factory.core_registry()

        assert set(registry.keys) == set(CORE_PLATFORMS)
        assert isinstance(registry.resolve("instagram"), MetaGateway)
        assert isinstance(registry.resolve("x"), TwitterGateway)
        assert registry.resolve("bluesky") is None

    def test_additional_registry(self, factory):
        registry = factory.additional_registry()

        assert set(registry.keys) == set(ADDITIONAL_PLATFORMS)
        assert isinstance(registry.resolve("twitch"), TwitchGateway)
        assert isinstance(registry.resolve("threads"), ThreadsSimulatorGateway)
        assert registry.supports("google_business_profile")
        assert not registry.supports("facebook")

    def test_families_are_disjoint(self):
        assert not set(CORE_PLATFORMS) & set(ADDITIONAL_PLATFORMS)
        assert set(CORE_PLATFORMS) | set(ADDITIONAL_PLATFORMS) == set(Platform)

    def test_ads_registry(self, factory):
        registry = factory.ads_registry()

        assert isinstance(registry.resolve("meta"), MetaAdsGateway)
        assert isinstance(registry.resolve("google"), GoogleAdsGateway)
        assert isinstance(registry.resolve("TikTok"), TikTokAdsGateway)

    def test_unknown_platform_raises(self, factory):
        with pytest.raises(ValueError, match="Unsupported platform"):
            factory.create_platform_gateway("myspace")

    def test_unknown_ad_platform_raises(self, factory):
        with pytest.raises(ValueError, match="Unsupported ad platform"):
            factory.create_ad_gateway("snapchat")

    def test_creates_new_instances(self, factory):
        assert factory.create_ad_gateway(AdPlatform.META) is not factory.create_ad_gateway(AdPlatform.META)

    def test_youtube_video_cap_from_settings(self):
        factory = GatewayFactory(Settings(youtube_max_video_bytes=1024))

        gateway = factory.create_platform_gateway(Platform.YOUTUBE)

        assert isinstance(gateway, YouTubeGateway)
        assert gateway._max_video_bytes == 1024
