"""
Polling primitive reconciling the write path with the read path.

Transactions are confirmed on-chain through ``PendingWrite.wait()``, but the
indexing API catches up asynchronously. Callers that need to read their own
writes poll a predicate until it holds:

    async def collection_indexed():
        page = await sdk.query_by_collection(address)
        return page["total"] > 0

    await await_condition(
        collection_indexed,
        timeout=120.0,
        interval=1.0,
        description="Waiting for NFT collection to be available",
    )
"""

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Union

from .errors import PollTimeoutError, ValidationError, error_boundary
from .messages import ErrorLocation, ErrorMessage

logger = logging.getLogger(__name__)

Predicate = Callable[[], Union[bool, Awaitable[bool]]]


@dataclass(frozen=True)
class PollSpec:
    """Parameters of a single poll. Times are in seconds."""

    predicate: Predicate
    timeout: float
    interval: float
    description: str = ""


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


async def _evaluate(predicate: Predicate) -> bool:
    result = predicate()
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


async def await_condition(
    predicate: Predicate,
    timeout: float,
    interval: float,
    description: str = "",
) -> None:
    """
    Re-evaluate ``predicate`` at a fixed interval until it returns true.

    Args:
        predicate: Zero-argument callable returning a bool or an awaitable bool
        timeout: Seconds before giving up
        interval: Seconds between evaluations (constant, no backoff)
        description: Included in log records and in the timeout message

    Raises:
        ValidationError: If either time is not a number, ``interval <= 0``
            or ``timeout < interval``
        PollTimeoutError: If the predicate is still false at the deadline
        SdkError: If the predicate raises; polling stops immediately
    """
    location = ErrorLocation.POLLER_AWAIT_CONDITION
    if not _is_number(interval) or not interval > 0:
        raise ValidationError(ErrorMessage.INVALID_POLL_INTERVAL, location, field="interval")
    if not _is_number(timeout) or not timeout >= interval:
        raise ValidationError(ErrorMessage.INVALID_POLL_TIMEOUT, location, field="timeout")

    deadline = time.monotonic() + timeout
    attempt = 0
    while True:
        attempt += 1
        with error_boundary(location):
            satisfied = await _evaluate(predicate)
        if satisfied:
            logger.info("Condition met after %d attempt(s): %s", attempt, description)
            return

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            suffix = f": {description}" if description else ""
            raise PollTimeoutError(
                f"{ErrorMessage.CONDITION_TIMED_OUT} ({timeout}s){suffix}", location
            )
        logger.debug("Condition not met (attempt %d), retrying: %s", attempt, description)
        await asyncio.sleep(min(interval, remaining))


async def await_spec(spec: PollSpec) -> None:
    """Run ``await_condition`` from a ``PollSpec``."""
    await await_condition(spec.predicate, spec.timeout, spec.interval, spec.description)
