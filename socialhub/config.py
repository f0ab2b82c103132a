from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment."""

    # Service
    service_name: str = "socialhub"
    debug: bool = False

    # Outbound HTTP
    http_timeout_seconds: float = 10.0
    dispatch_timeout_seconds: float = 30.0  # Per account, whole adapter call

    # YouTube uploads stream from the source URL; larger videos are refused
    youtube_max_video_bytes: int = 256 * 1024 * 1024

    # Twitch API (client id is process-wide, tokens are per account)
    twitch_client_id: str = ""

    # Google Ads API
    google_ads_developer_token: str = ""
    google_ads_login_customer_id: str | None = None  # Manager account, if any

    # Attribution
    attribution_website_url: str = "https://your-website.com"
    ga4_measurement_id: str = ""
    ga4_api_secret: str = ""

    # Threads simulator
    threads_success_rate: float = 0.9
    threads_delay_seconds: float = 1.0

    @property
    def ga4_enabled(self) -> bool:
        return bool(self.ga4_measurement_id and self.ga4_api_secret)

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
