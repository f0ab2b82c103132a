from .ad_platform_gateway import AdPlatform, AdPlatformGateway, canonical_ad_platform
from .attribution_sink import AttributionEvent, AttributionSink
from .platform_gateway import ACCOUNT_PLATFORMS, Platform, PlatformGateway, canonical_platform

__all__ = [
    "AdPlatform",
    "AdPlatformGateway",
    "AttributionEvent",
    "AttributionSink",
    "ACCOUNT_PLATFORMS",
    "Platform",
    "PlatformGateway",
    "canonical_ad_platform",
    "canonical_platform",
]
