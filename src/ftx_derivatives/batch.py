"""Concurrent multi-key fetch.

fetch_many fans out one coroutine per key with asyncio.gather and joins
once. The first failure propagates and no partial map is returned;
sibling fetches already in flight are not cancelled, their results are
discarded.

fetch_many_settled keeps per-key outcomes instead, so a caller can see
which keys failed.
"""

import asyncio
from collections.abc import Awaitable, Callable, Hashable, Iterable
from typing import TypeVar

from ftx_derivatives.exceptions import FTXDerivativesError
from ftx_derivatives.logging import get_logger

logger = get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


async def fetch_many(
    keys: Iterable[K],
    fetch_one: Callable[[K], Awaitable[V]],
) -> dict[K, V]:
    """Fetch every key concurrently; all results or the first error.

    Duplicate keys are each fetched; the map keeps the last result.

    Raises:
        Whatever the first failing fetch_one raised.
    """
    key_list = list(keys)
    logger.debug("batch_fetch_started", keys=len(key_list))

    try:
        results = await asyncio.gather(*(fetch_one(key) for key in key_list))
    except FTXDerivativesError as exc:
        logger.warning("batch_fetch_failed", keys=len(key_list), error=str(exc))
        raise

    return dict(zip(key_list, results))


async def fetch_many_settled(
    keys: Iterable[K],
    fetch_one: Callable[[K], Awaitable[V]],
) -> dict[K, V | FTXDerivativesError]:
    """Fetch every key concurrently, keeping each key's result or client error.

    Exceptions outside the client's error family are re-raised rather than
    stored.
    """
    key_list = list(keys)
    results = await asyncio.gather(
        *(fetch_one(key) for key in key_list), return_exceptions=True
    )

    settled: dict[K, V | FTXDerivativesError] = {}
    failed = 0
    for key, result in zip(key_list, results):
        if isinstance(result, FTXDerivativesError):
            failed += 1
            logger.warning("batch_key_failed", key=key, error=str(result))
        elif isinstance(result, BaseException):
            raise result
        settled[key] = result

    logger.debug("batch_fetch_settled", keys=len(key_list), failed=failed)
    return settled
