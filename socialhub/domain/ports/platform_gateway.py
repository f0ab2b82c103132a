"""
Outbound port for publishing to social platforms.

The publishing aggregators depend on this interface; concrete vendor
adapters live in socialhub.platforms.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from ..models import PostContent, PostResult, SocialMediaAccount


class Platform(str, Enum):
    """Canonical platform keys used for adapter lookup."""

    META = "meta"
    LINKEDIN = "linkedin"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    PINTEREST = "pinterest"
    GOOGLE_BUSINESS = "google_business"
    BLUESKY = "bluesky"
    TWITCH = "twitch"
    THREADS = "threads"


# Account platform names accepted by the aggregators; aliases share an adapter
ACCOUNT_PLATFORMS: dict[str, Platform] = {
    "facebook": Platform.META,
    "instagram": Platform.META,
    "linkedin": Platform.LINKEDIN,
    "tiktok": Platform.TIKTOK,
    "youtube": Platform.YOUTUBE,
    "twitter": Platform.TWITTER,
    "x": Platform.TWITTER,
    "pinterest": Platform.PINTEREST,
    "google_business": Platform.GOOGLE_BUSINESS,
    "google_business_profile": Platform.GOOGLE_BUSINESS,
    "bluesky": Platform.BLUESKY,
    "twitch": Platform.TWITCH,
    "threads": Platform.THREADS,
}


def canonical_platform(name: str) -> Platform | None:
    """Resolve an account's platform string to its adapter key."""
    return ACCOUNT_PLATFORMS.get(name.strip().lower())


class PlatformGateway(ABC):
    """
    Outbound port for one social platform.

    Implementations never raise from publish_post: every failure is
    returned as an unsuccessful PostResult.
    """

    @property
    @abstractmethod
    def platform(self) -> Platform:
        """Return the canonical platform this gateway handles."""
        ...

    @abstractmethod
    async def publish_post(
        self,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> PostResult:
        """
        Publish content to one account.

        Args:
            account: Target account (token is used as-is)
            content: Canonical content

        Returns:
            PostResult carrying the vendor post id or an error message
        """
        ...

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict[str, Any] | None:
        """Raw vendor metrics for the account, or None when unavailable."""
        return None
