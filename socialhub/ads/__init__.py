from .base import HttpAdPlatformGateway
from .google import GoogleAdsGateway
from .meta import MetaAdsGateway
from .tiktok import TikTokAdsGateway

__all__ = [
    "GoogleAdsGateway",
    "HttpAdPlatformGateway",
    "MetaAdsGateway",
    "TikTokAdsGateway",
]
