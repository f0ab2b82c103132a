"""
Application services for multi-account publishing.

PublishingService fans one PostContent out to many accounts and returns one
PostResult per active account, in input order. ExtendedPublishingService
does the same for the additional platform family and records attribution
for every successful post. UnifiedPublisher routes a mixed batch to both.
"""

import asyncio

import structlog

from ...domain.models import PostContent, PostResult, SocialMediaAccount
from ...domain.ports import PlatformGateway
from ...domain.result import ErrorKind
from ...infrastructure.adapters.gateway_registry import GatewayRegistry
from .attribution_service import TrafficAttributionService
from .dispatch import BackgroundTasks, call_with_timeout

logger = structlog.get_logger()

DEFAULT_DISPATCH_TIMEOUT_SECONDS = 30.0


class PublishingService:
    """
    Publishes content to the core platform family.

    Accounts are dispatched concurrently; a failure on one account never
    affects another. Inactive accounts produce no result.
    """

    unsupported_message = "Unsupported platform"

    def __init__(
        self,
        registry: GatewayRegistry,
        dispatch_timeout: float = DEFAULT_DISPATCH_TIMEOUT_SECONDS,
    ) -> None:
        self._registry = registry
        self._dispatch_timeout = dispatch_timeout

    def supports(self, platform: str) -> bool:
        return self._registry.supports(platform)

    @property
    def platforms(self) -> list[str]:
        return sorted(key.value for key in self._registry.keys)

    async def publish_to_all_platforms(
        self,
        accounts: list[SocialMediaAccount],
        content: PostContent,
    ) -> list[PostResult]:
        """
        Publish content to every active account.

        Args:
            accounts: Target accounts, any platform
            content: Canonical content

        Returns:
            One PostResult per active account, in input order
        """
        active = [account for account in accounts if account.is_active]
        skipped = len(accounts) - len(active)

        results = list(
            await asyncio.gather(*(self._publish_one(account, content) for account in active))
        )

        logger.info(
            "Publish batch completed",
            total_accounts=len(accounts),
            skipped_inactive=skipped,
            successful=sum(1 for r in results if r.success),
        )
        return results

    async def _publish_one(
        self,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> PostResult:
        gateway: PlatformGateway | None = self._registry.resolve(account.platform)
        if gateway is None:
            logger.warning(
                "Unsupported platform",
                platform=account.platform,
                account_id=account.id,
                kind=ErrorKind.UNSUPPORTED.value,
            )
            return PostResult.failed(account.platform, self.unsupported_message)

        outcome = await call_with_timeout(
            gateway.publish_post(account, content),
            self._dispatch_timeout,
            platform=account.platform,
            account_id=account.id,
        )
        if not outcome.ok:
            return PostResult.failed(account.platform, outcome.error)

        result = outcome.value
        if result.success:
            self._after_success(account, result)
        return result

    def _after_success(self, account: SocialMediaAccount, result: PostResult) -> None:
        """Hook for side effects after a successful publish."""

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict | None:
        """Raw vendor metrics for a social account, or None."""
        gateway = self._registry.resolve(account.platform)
        if gateway is None:
            return None
        outcome = await call_with_timeout(
            gateway.get_account_metrics(account),
            self._dispatch_timeout,
            platform=account.platform,
            account_id=account.id,
        )
        return outcome.value if outcome.ok else None


class ExtendedPublishingService(PublishingService):
    """
    Publishes to the additional platform family and tracks attribution.

    Attribution runs as a background task after each success; it is never
    awaited by publish_to_all_platforms and its failure cannot change the
    returned results.
    """

    unsupported_message = "Platform not supported by additional platforms service"

    def __init__(
        self,
        registry: GatewayRegistry,
        attribution: TrafficAttributionService,
        website_url: str,
        dispatch_timeout: float = DEFAULT_DISPATCH_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(registry, dispatch_timeout)
        self._attribution = attribution
        self._website_url = website_url
        self._background = BackgroundTasks()

    def _after_success(self, account: SocialMediaAccount, result: PostResult) -> None:
        self._background.spawn(
            self._attribution.track_social_traffic(result.post_id, account.platform, self._website_url),
            "Attribution tracking",
            platform=account.platform,
            post_id=result.post_id,
        )

    async def get_channel_info(self, account: SocialMediaAccount) -> dict | None:
        """Channel details for platforms that expose them (Twitch)."""
        gateway = self._registry.resolve(account.platform)
        get_channel_info = getattr(gateway, "get_channel_info", None)
        if get_channel_info is None:
            return None
        outcome = await call_with_timeout(
            get_channel_info(account),
            self._dispatch_timeout,
            platform=account.platform,
            account_id=account.id,
        )
        return outcome.value if outcome.ok else None

    @property
    def pending_tasks(self) -> int:
        return self._background.pending

    async def drain(self) -> None:
        """Wait for outstanding attribution tasks."""
        await self._background.drain()


class UnifiedPublisher:
    """
    Publishes a mixed batch across both platform families.

    Accounts on additional platforms go to the extended service; all others,
    including unknown platforms, go to the core service. Results are the core
    results followed by the extended results, each in input order.
    """

    def __init__(self, core: PublishingService, extended: ExtendedPublishingService) -> None:
        self._core = core
        self._extended = extended

    @property
    def core(self) -> PublishingService:
        return self._core

    @property
    def extended(self) -> ExtendedPublishingService:
        return self._extended

    async def publish(
        self,
        accounts: list[SocialMediaAccount],
        content: PostContent,
    ) -> list[PostResult]:
        extended_accounts = [a for a in accounts if self._extended.supports(a.platform)]
        core_accounts = [a for a in accounts if not self._extended.supports(a.platform)]

        core_results, extended_results = await asyncio.gather(
            self._core.publish_to_all_platforms(core_accounts, content),
            self._extended.publish_to_all_platforms(extended_accounts, content),
        )
        return core_results + extended_results

    async def get_account_metrics(self, account: SocialMediaAccount) -> dict | None:
        if self._extended.supports(account.platform):
            return await self._extended.get_channel_info(account)
        return await self._core.get_account_metrics(account)
