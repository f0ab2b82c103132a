"""
Threads publishing simulator.

Threads has no stable public posting API. This gateway stands in for it
behind the same PlatformGateway interface, so a live implementation can
replace it in the registry without touching the aggregators.
"""

import asyncio
import random
import time
from collections.abc import Awaitable, Callable

import structlog

from ..domain.models import PostContent, PostResult, SocialMediaAccount
from ..domain.ports import Platform, PlatformGateway

logger = structlog.get_logger()

UNAVAILABLE_ERROR = "Threads API temporarily unavailable"


class ThreadsSimulatorGateway(PlatformGateway):
    """Simulated Threads gateway with a fixed success probability and delay."""

    def __init__(
        self,
        success_rate: float = 0.9,
        delay_seconds: float = 1.0,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate must be between 0 and 1")
        self._success_rate = success_rate
        self._delay_seconds = delay_seconds
        self._rng = rng or random.Random()
        self._sleep = sleep
        self._clock = clock

    @property
    def platform(self) -> Platform:
        return Platform.THREADS

    async def publish_post(
        self,
        account: SocialMediaAccount,
        content: PostContent,
    ) -> PostResult:
        await self._sleep(self._delay_seconds)

        if self._rng.random() < self._success_rate:
            post_id = f"threads_sim_{int(self._clock() * 1000)}"
            logger.info("Simulated Threads post", account_id=account.id, post_id=post_id)
            return PostResult.succeeded(account.platform, post_id)

        logger.warning("Simulated Threads failure", account_id=account.id)
        return PostResult.failed(account.platform, UNAVAILABLE_ERROR)
