"""
Shared HTTP plumbing for ad platform gateways.

Subclasses implement _fetch_metrics() / _fetch_campaigns() and raise
VendorRejection on vendor errors. The public methods never raise: metrics
fall back to None and campaigns to an empty list.
"""

from abc import abstractmethod
from collections.abc import Callable
from datetime import date

import httpx
import structlog

from ..domain.models import AdAccount, AdMetrics, CampaignData
from ..domain.ports import AdPlatformGateway
from ..domain.result import ErrorKind, Outcome
from ..infrastructure.logging import Timer, redact_secrets
from ..platforms.base import DEFAULT_TIMEOUT_SECONDS, VendorRejection

logger = structlog.get_logger()


class HttpAdPlatformGateway(AdPlatformGateway):
    BASE_URL: str = ""
    DISPLAY_NAME: str = ""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._today = today

    @property
    def default_error(self) -> str:
        return f"{self.DISPLAY_NAME} API error"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    @abstractmethod
    async def _fetch_metrics(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
        date_range: str,
    ) -> AdMetrics:
        ...

    @abstractmethod
    async def _fetch_campaigns(
        self,
        client: httpx.AsyncClient,
        account: AdAccount,
    ) -> list[CampaignData]:
        ...

    def check_date_range(self, date_range: str) -> str | None:
        """Return an error message when the range cannot be sent to this vendor."""
        return None

    async def _attempt(self, operation: str, account: AdAccount, call) -> Outcome:
        """Run one vendor call, converting every failure into an Outcome."""
        try:
            with Timer() as t:
                async with self._client() as client:
                    value = await call(client)
            logger.info(
                "Ad platform call completed",
                operation=operation,
                platform=self.platform.value,
                account_id=account.id,
                duration_ms=t.duration_ms,
            )
            return Outcome.success(value)

        except VendorRejection as e:
            error_msg = redact_secrets(str(e)) or self.default_error
            logger.error(
                f"{self.DISPLAY_NAME} API error",
                operation=operation,
                account_id=account.id,
                error=error_msg,
            )
            return Outcome.failure(error_msg, ErrorKind.VENDOR)

        except Exception as e:
            error_msg = redact_secrets(str(e)) or self.default_error
            logger.error(
                f"Error fetching {self.DISPLAY_NAME} data",
                operation=operation,
                account_id=account.id,
                error=error_msg,
                error_type=type(e).__name__,
            )
            return Outcome.failure(error_msg, ErrorKind.TRANSPORT)

    async def get_account_metrics(
        self,
        account: AdAccount,
        date_range: str,
    ) -> AdMetrics | None:
        precondition = self.check_date_range(date_range)
        if precondition:
            logger.info(
                "Ad metrics skipped",
                platform=self.platform.value,
                account_id=account.id,
                reason=precondition,
            )
            return None
        outcome = await self._attempt(
            "metrics",
            account,
            lambda client: self._fetch_metrics(client, account, date_range),
        )
        return outcome.value if outcome.ok else None

    async def get_campaigns(self, account: AdAccount) -> list[CampaignData]:
        if not self.supports_campaigns:
            return []
        outcome = await self._attempt(
            "campaigns",
            account,
            lambda client: self._fetch_campaigns(client, account),
        )
        return outcome.value_or([])
