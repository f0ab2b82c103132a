"""
Canonical account, content and result models.

These are the platform-agnostic shapes every adapter translates from and to.
Accounts and content are supplied fresh on each call by the caller; the core
never mutates them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class SocialMediaAccount:
    """One connected account on one social platform."""

    id: str
    platform: str
    account_id: str
    account_name: str
    access_token: str = field(repr=False)
    refresh_token: str | None = field(default=None, repr=False)
    expires_at: datetime | None = None
    permissions: frozenset[str] = frozenset()
    is_active: bool = True


@dataclass(frozen=True)
class PostContent:
    """Platform-agnostic content to publish."""

    text: str
    image_urls: tuple[str, ...] = ()
    video_url: str | None = None
    hashtags: tuple[str, ...] = ()
    scheduled_for: datetime | None = None

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValueError("Post text cannot be empty")

    @property
    def first_image(self) -> str | None:
        return self.image_urls[0] if self.image_urls else None


@dataclass(frozen=True)
class PostResult:
    """Outcome of one publish attempt against one account."""

    success: bool
    platform: str
    post_id: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and (not self.post_id or self.error is not None):
            raise ValueError("Successful result requires a post id and no error")
        if not self.success and (not self.error or self.post_id is not None):
            raise ValueError("Failed result requires an error and no post id")

    @classmethod
    def succeeded(cls, platform: str, post_id: str) -> "PostResult":
        return cls(success=True, platform=platform, post_id=post_id)

    @classmethod
    def failed(cls, platform: str, error: str) -> "PostResult":
        return cls(success=False, platform=platform, error=error)


class CampaignStatus(str, Enum):
    """Tri-state campaign status shared by every ad platform."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"

    @classmethod
    def from_vendor(cls, status: str | None) -> "CampaignStatus":
        """Map a vendor status (ACTIVE, ENABLED, PAUSED, ARCHIVED, ...)."""
        normalized = (status or "").strip().lower()
        if normalized in ("active", "enabled"):
            return cls.ACTIVE
        if normalized == "paused":
            return cls.PAUSED
        return cls.COMPLETED


@dataclass(frozen=True)
class AdAccount:
    """One connected advertiser account on an ad platform."""

    id: str
    platform: str
    account_id: str
    account_name: str
    access_token: str = field(repr=False)
    currency: str = "USD"


@dataclass(frozen=True)
class AdMetrics:
    """Account-level metrics in normalized units (currency, percent)."""

    spend: float = 0.0
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    cpm: float = 0.0
    conversions: int = 0
    date_range: str = ""


@dataclass(frozen=True)
class CampaignData:
    id: str
    name: str
    status: CampaignStatus
    spend: float = 0.0
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    start_date: str | None = None
    end_date: str | None = None


@dataclass
class ConsolidatedMetrics:
    """Cross-account totals; averages are plain means over accounts that reported."""

    total_spend: float = 0.0
    total_clicks: int = 0
    total_impressions: int = 0
    total_conversions: int = 0
    average_ctr: float = 0.0
    average_cpm: float = 0.0
    platform_breakdown: dict[str, AdMetrics] = field(default_factory=dict)


@dataclass(frozen=True)
class TrackingResult:
    success: bool
    tracking_id: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class SocialSource:
    source: str
    sessions: int
    conversions: int


@dataclass(frozen=True)
class PeriodComparison:
    sessions_change: str
    conversion_rate_change: str


@dataclass(frozen=True)
class SocialTrafficReport:
    date_range: str
    total_sessions: int
    social_sessions: int
    social_conversion_rate: float
    top_social_sources: list[SocialSource]
    period_comparison: PeriodComparison
