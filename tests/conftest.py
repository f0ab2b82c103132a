from datetime import date

import pytest

from socialhub.domain.models import AdAccount, PostContent, SocialMediaAccount


@pytest.fixture
def text_content() -> PostContent:
    return PostContent(text="Launching our spring collection")


@pytest.fixture
def image_content() -> PostContent:
    return PostContent(
        text="New arrivals",
        image_urls=("https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"),
    )


@pytest.fixture
def video_content() -> PostContent:
    return PostContent(
        text="Behind the scenes",
        video_url="https://cdn.example.com/clip.mp4",
        hashtags=("bts", "studio"),
    )


@pytest.fixture
def make_account():
    def _make(platform: str, account_id: str = "acct-1", is_active: bool = True, **kwargs) -> SocialMediaAccount:
        return SocialMediaAccount(
            id=f"{platform}-{account_id}",
            platform=platform,
            account_id=account_id,
            account_name=f"{platform} account",
            access_token="test-token",
            is_active=is_active,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_ad_account():
    def _make(platform: str, account_id: str = "1234567890") -> AdAccount:
        return AdAccount(
            id=f"{platform}-ads",
            platform=platform,
            account_id=account_id,
            account_name=f"{platform} ads",
            access_token="ads-token",
        )

    return _make


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 31)
