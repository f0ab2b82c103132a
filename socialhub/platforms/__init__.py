from .base import HttpPlatformGateway, VendorRejection, extract_vendor_error
from .bluesky import BlueskyGateway
from .google_business import GoogleBusinessGateway
from .linkedin import LinkedInGateway
from .meta import MetaGateway
from .pinterest import PinterestGateway
from .threads import ThreadsSimulatorGateway
from .tiktok import TikTokGateway
from .twitch import TwitchGateway
from .twitter import TwitterGateway
from .youtube import YouTubeGateway

__all__ = [
    "BlueskyGateway",
    "GoogleBusinessGateway",
    "HttpPlatformGateway",
    "LinkedInGateway",
    "MetaGateway",
    "PinterestGateway",
    "ThreadsSimulatorGateway",
    "TikTokGateway",
    "TwitchGateway",
    "TwitterGateway",
    "VendorRejection",
    "YouTubeGateway",
    "extract_vendor_error",
]
