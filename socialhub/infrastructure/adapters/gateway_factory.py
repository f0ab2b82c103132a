"""
Factory for creating platform gateway instances and registries.

This factory creates the appropriate gateway implementation for each
platform and groups them into the registries the aggregators dispatch on.
It encapsulates the creation logic and configuration.
"""

import httpx

from ...ads import GoogleAdsGateway, MetaAdsGateway, TikTokAdsGateway
from ...config import Settings, settings as default_settings
from ...domain.ports import (
    AdPlatform,
    AdPlatformGateway,
    Platform,
    PlatformGateway,
    canonical_ad_platform,
    canonical_platform,
)
from ...platforms import (
    BlueskyGateway,
    GoogleBusinessGateway,
    LinkedInGateway,
    MetaGateway,
    PinterestGateway,
    ThreadsSimulatorGateway,
    TikTokGateway,
    TwitchGateway,
    TwitterGateway,
    YouTubeGateway,
)
from .gateway_registry import GatewayRegistry

CORE_PLATFORMS = (
    Platform.META,
    Platform.LINKEDIN,
    Platform.TIKTOK,
    Platform.YOUTUBE,
    Platform.TWITTER,
    Platform.PINTEREST,
)

ADDITIONAL_PLATFORMS = (
    Platform.GOOGLE_BUSINESS,
    Platform.BLUESKY,
    Platform.TWITCH,
    Platform.THREADS,
)

PlatformRegistry = GatewayRegistry[Platform, PlatformGateway]
AdPlatformRegistry = GatewayRegistry[AdPlatform, AdPlatformGateway]


class GatewayFactory:
    """
    Factory for gateway instances.

    Args:
        config: Settings to read credentials and timeouts from
        transport: Optional httpx transport shared by every HTTP gateway
                   (tests pass an httpx.MockTransport)
    """

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or default_settings
        self._transport = transport

    def create_platform_gateway(self, platform: Platform) -> PlatformGateway:
        """
        Create a new gateway for the platform.

        Raises:
            ValueError: If the platform is not supported
        """
        http = {"timeout": self._config.http_timeout_seconds, "transport": self._transport}
        match platform:
            case Platform.META:
                return MetaGateway(**http)
            case Platform.LINKEDIN:
                return LinkedInGateway(**http)
            case Platform.TIKTOK:
                return TikTokGateway(**http)
            case Platform.YOUTUBE:
                return YouTubeGateway(max_video_bytes=self._config.youtube_max_video_bytes, **http)
            case Platform.TWITTER:
                return TwitterGateway(**http)
            case Platform.PINTEREST:
                return PinterestGateway(**http)
            case Platform.GOOGLE_BUSINESS:
                return GoogleBusinessGateway(**http)
            case Platform.BLUESKY:
                return BlueskyGateway(**http)
            case Platform.TWITCH:
                return TwitchGateway(client_id=self._config.twitch_client_id, **http)
            case Platform.THREADS:
                return ThreadsSimulatorGateway(
                    success_rate=self._config.threads_success_rate,
                    delay_seconds=self._config.threads_delay_seconds,
                )
            case _:
                raise ValueError(f"Unsupported platform: {platform}")

    def create_ad_gateway(self, platform: AdPlatform) -> AdPlatformGateway:
        """
        Create a new gateway for the ad platform.

        Raises:
            ValueError: If the platform is not supported
        """
        http = {"timeout": self._config.http_timeout_seconds, "transport": self._transport}
        match platform:
            case AdPlatform.META:
                return MetaAdsGateway(**http)
            case AdPlatform.GOOGLE:
                return GoogleAdsGateway(
                    developer_token=self._config.google_ads_developer_token,
                    login_customer_id=self._config.google_ads_login_customer_id,
                    **http,
                )
            case AdPlatform.TIKTOK:
                return TikTokAdsGateway(**http)
            case _:
                raise ValueError(f"Unsupported ad platform: {platform}")

    def core_registry(self) -> PlatformRegistry:
        return GatewayRegistry(
            canonical_platform,
            {platform: self.create_platform_gateway(platform) for platform in CORE_PLATFORMS},
        )

    def additional_registry(self) -> PlatformRegistry:
        return GatewayRegistry(
            canonical_platform,
            {platform: self.create_platform_gateway(platform) for platform in ADDITIONAL_PLATFORMS},
        )

    def ads_registry(self) -> AdPlatformRegistry:
        return GatewayRegistry(
            canonical_ad_platform,
            {platform: self.create_ad_gateway(platform) for platform in AdPlatform},
        )
