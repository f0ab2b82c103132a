"""
Helpers for fanning calls out across accounts.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

import structlog

from ...domain.result import ErrorKind, Outcome
from ...infrastructure.logging import redact_secrets

logger = structlog.get_logger()

T = TypeVar("T")


async def call_with_timeout(
    call: Awaitable[T],
    timeout: float,
    **log_context,
) -> Outcome[T]:
    """
    Await one adapter call under a deadline.

    Adapters do not raise, so an exception here is unexpected; it is logged
    and reported as a failed Outcome so the rest of the batch continues.
    """
    try:
        return Outcome.success(await asyncio.wait_for(call, timeout))
    except asyncio.TimeoutError:
        logger.error("Adapter call timed out", timeout_seconds=timeout, **log_context)
        return Outcome.failure(f"Request timed out after {timeout:g}s", ErrorKind.TIMEOUT)
    except Exception as e:
        logger.error(
            "Adapter call failed unexpectedly",
            error=redact_secrets(str(e)),
            error_type=type(e).__name__,
            exc_info=True,
            **log_context,
        )
        return Outcome.failure(redact_secrets(str(e)) or type(e).__name__, ErrorKind.TRANSPORT)


class BackgroundTasks:
    """
    Best-effort side effects that never block or fail the caller.

    Tasks are kept referenced until done; drain() waits for them (tests,
    shutdown).
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    def spawn(self, call: Awaitable, description: str, **log_context) -> asyncio.Task:
        task = asyncio.ensure_future(self._best_effort(call, description, log_context))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @staticmethod
    async def _best_effort(call: Awaitable, description: str, log_context: dict) -> None:
        try:
            await call
        except Exception as e:
            logger.warning(
                f"{description} failed",
                error=redact_secrets(str(e)),
                error_type=type(e).__name__,
                **log_context,
            )

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*list(self._tasks))
