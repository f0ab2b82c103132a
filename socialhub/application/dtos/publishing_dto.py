"""Publishing and social metrics DTOs (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ...domain.models import PostContent, PostResult, SocialMediaAccount


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SocialMediaAccountDTO(CamelModel):
    id: str
    platform: str = Field(..., min_length=1)
    account_id: str
    account_name: str
    access_token: str = Field(..., repr=False)
    refresh_token: str | None = Field(default=None, repr=False)
    expires_at: datetime | None = None
    permissions: list[str] = Field(default_factory=list)
    is_active: bool = True

    def to_domain(self) -> SocialMediaAccount:
        return SocialMediaAccount(
            id=self.id,
            platform=self.platform,
            account_id=self.account_id,
            account_name=self.account_name,
            access_token=self.access_token,
            refresh_token=self.refresh_token,
            expires_at=self.expires_at,
            permissions=frozenset(self.permissions),
            is_active=self.is_active,
        )


class PostContentDTO(CamelModel):
    text: str = Field(..., min_length=1)
    image_urls: list[str] = Field(default_factory=list)
    video_url: str | None = None
    hashtags: list[str] = Field(default_factory=list)
    scheduled_for: datetime | None = None

    @field_validator("text", mode="after")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Post text cannot be empty")
        return v

    def to_domain(self) -> PostContent:
        return PostContent(
            text=self.text,
            image_urls=tuple(self.image_urls),
            video_url=self.video_url,
            hashtags=tuple(self.hashtags),
            scheduled_for=self.scheduled_for,
        )


class PublishRequestDTO(CamelModel):
    accounts: list[SocialMediaAccountDTO]
    content: PostContentDTO


class PostResultDTO(CamelModel):
    success: bool
    platform: str
    post_id: str | None = None
    error: str | None = None

    @classmethod
    def from_domain(cls, result: PostResult) -> "PostResultDTO":
        return cls(
            success=result.success,
            platform=result.platform,
            post_id=result.post_id,
            error=result.error,
        )


class SocialMetricsRequestDTO(CamelModel):
    account: SocialMediaAccountDTO
