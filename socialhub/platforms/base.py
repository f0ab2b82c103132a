"""
Shared HTTP plumbing for social platform gateways.

Concrete gateways implement _publish() and raise VendorRejection when the
vendor answers with an error; publish_post() turns every failure path into
an unsuccessful PostResult so nothing escapes the adapter boundary.
"""

from abc import abstractmethod
from typing import Any

import httpx
import structlog

from ..domain.models import PostContent, PostResult, SocialMediaAccount
from ..domain.ports import PlatformGateway
from ..domain.result import ErrorKind, Outcome
from ..infrastructure.logging import Timer, redact_secrets

logger = structlog.get_logger()

DEFAULT_TIMEOUT_SECONDS = 10.0


class VendorRejection(Exception):
    """The vendor answered, but refused the request."""


class ContentRejection(Exception):
    """The content turned out to be unpublishable once fetched."""


def first_batch(payload: Any) -> Any:
    """Unwrap a streamed body (a list of batches) to its first batch."""
    if isinstance(payload, list) and payload:
        return payload[0]
    return payload


def extract_vendor_error(payload: Any, default: str) -> str:
    """
    Pull a human-readable message out of a vendor error body.

    Most specific shape first: structured error object, then an errors
    array, then a top-level message, then a bare error code string.
    """
    payload = first_batch(payload)
    if not isinstance(payload, dict):
        return default

    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])

    errors = payload.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        detail = errors[0].get("detail") or errors[0].get("message")
        if detail:
            return str(detail)

    if payload.get("message"):
        return str(payload["message"])

    if isinstance(error, str) and error:
        return error

    return default


def has_error_envelope(payload: Any) -> bool:
    """True when a decoded body carries a vendor error object."""
    payload = first_batch(payload)
    if not isinstance(payload, dict):
        return False
    return bool(payload.get("error")) or bool(payload.get("errors"))


def decode_json(response: httpx.Response) -> Any:
    """Decode a response body, treating an empty body as an empty object."""
    if not response.content:
        return {}
    return response.json()


def parse_vendor_response(response: httpx.Response, default_error: str) -> Any:
    """Decode a response and raise VendorRejection on vendor errors."""
    payload = decode_json(response)
    if not response.is_success or has_error_envelope(payload):
        raise VendorRejection(extract_vendor_error(payload, default_error))
    return payload


class HttpPlatformGateway(PlatformGateway):
    """Base class for gateways backed by a vendor REST API."""

    BASE_URL: str = ""
    DISPLAY_NAME: str = ""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    @property
    def default_error(self) -> str:
        return f"{self.DISPLAY_NAME} API error"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout, transport=self._transport)

    def check_content(self, content: PostContent) -> str | None:
        """Return an error message when content cannot go to this platform."""
        return None

    @abstractmethod
    async def _publish(
        self,
        client: httpx.AsyncClient,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> str:
        """
        Perform the vendor calls and return the vendor post id.

        Raises:
            VendorRejection: When the vendor reports an error
            ContentRejection: When fetched media cannot be sent
        """
        ...

    def _parse(self, response: httpx.Response) -> Any:
        return parse_vendor_response(response, self.default_error)

    def _require_id(self, post_id: Any) -> str:
        if not post_id:
            raise VendorRejection(f"{self.DISPLAY_NAME} response did not include a post id")
        return str(post_id)

    async def publish_post(
        self,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> PostResult:
        """Publish to the account, converting every failure to a result."""
        outcome = await self.try_publish(account, content)
        if outcome.ok:
            return PostResult.succeeded(account.platform, outcome.value)
        return PostResult.failed(account.platform, outcome.error)

    async def try_publish(
        self,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> Outcome[str]:
        precondition = self.check_content(content)
        if precondition:
            logger.info(
                "Publish skipped",
                platform=account.platform,
                account_id=account.id,
                reason=precondition,
            )
            return Outcome.failure(precondition, ErrorKind.PRECONDITION)

        try:
            with Timer() as t:
                async with self._client() as client:
                    post_id = await self._publish(client, account, content)

            logger.info(
                "Post published",
                platform=account.platform,
                account_id=account.id,
                post_id=post_id,
                duration_ms=t.duration_ms,
            )
            return Outcome.success(post_id)

        except ContentRejection as e:
            logger.info(
                "Publish skipped",
                platform=account.platform,
                account_id=account.id,
                reason=str(e),
            )
            return Outcome.failure(str(e), ErrorKind.PRECONDITION)

        except VendorRejection as e:
            error_msg = redact_secrets(str(e)) or self.default_error
            logger.error(
                "Publish rejected by vendor",
                platform=account.platform,
                account_id=account.id,
                error=error_msg,
            )
            return Outcome.failure(error_msg, ErrorKind.VENDOR)

        except httpx.TimeoutException:
            error_msg = f"{self.DISPLAY_NAME} request timed out"
            logger.error("Publish failed", platform=account.platform, account_id=account.id, error=error_msg)
            return Outcome.failure(error_msg, ErrorKind.TRANSPORT)

        except (httpx.HTTPError, ValueError) as e:
            error_msg = redact_secrets(str(e)) or self.default_error
            logger.error(
                "Publish failed",
                platform=account.platform,
                account_id=account.id,
                error=error_msg,
                error_type=type(e).__name__,
            )
            return Outcome.failure(error_msg, ErrorKind.TRANSPORT)

        except Exception as e:
            error_msg = redact_secrets(str(e)) or self.default_error
            logger.error(
                "Publish failed",
                platform=account.platform,
                account_id=account.id,
                error=error_msg,
                error_type=type(e).__name__,
                exc_info=True,
            )
            return Outcome.failure(error_msg, ErrorKind.TRANSPORT)

    async def _fetch_json(
        self,
        account: SocialMediaAccount,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any] | None:
        """GET a read-only vendor resource; None on any error."""
        try:
            async with self._client() as client:
                response = await client.get(url, params=params, headers=headers)
            payload = decode_json(response)
            if not response.is_success:
                logger.error(
                    "Account metrics rejected by vendor",
                    platform=account.platform,
                    account_id=account.id,
                    status_code=response.status_code,
                    error=redact_secrets(extract_vendor_error(payload, self.default_error)),
                )
                return None
            return payload
        except Exception as e:
            logger.error(
                "Error fetching account metrics",
                platform=account.platform,
                account_id=account.id,
                error=redact_secrets(str(e)),
                error_type=type(e).__name__,
            )
            return None

    @staticmethod
    def bearer(account: SocialMediaAccount) -> dict[str, str]:
        return {"Authorization": f"Bearer {account.access_token}"}
