"""
Concurrent queries against several master servers
"""

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, List, Tuple, TypeVar, Union

from .config.validation import Timeout, validate_timeout
from .models import MultiQueryResult, QueryFailure, QuerySuccess, ServerAddress
from .query import query, server_addresses

logger = logging.getLogger(__name__)

T = TypeVar('T')
Outcome = Tuple[str, Union[T, Exception]]


async def _fan_out(
    master_addresses: Iterable[str],
    timeout: Timeout,
    fetch: Callable[[str, float], Awaitable[T]],
) -> List[Outcome]:
    """Run ``fetch`` against every master concurrently.

    Every task returns its own ``(master_address, result_or_error)`` pair, so
    one master's failure never reaches the others.
    """
    seconds = validate_timeout(timeout)

    async def run(master_address: str) -> Outcome:
        try:
            return master_address, await fetch(master_address, seconds)
        except Exception as e:
            logger.debug(f"{master_address} failed: {e}")
            return master_address, e

    return await asyncio.gather(*(run(address) for address in master_addresses))


async def query_multiple(master_addresses: Iterable[str], timeout: Timeout) -> MultiQueryResult:
    """
    Get server addresses from multiple master servers concurrently.

    Args:
        master_addresses: Master servers as ``host:port`` strings
        timeout: Timeout applied to each query

    Returns:
        MultiQueryResult with exactly one success or failure per input entry

    Usage:
        result = await query_multiple(["master.quakeworld.nu:27000"], 2.0)
        for failure in result.failed_queries():
            print(f"{failure.master_address}: {failure.error}")
        print(result.server_addresses())
    """
    result = MultiQueryResult()

    for master_address, outcome in await _fan_out(master_addresses, timeout, query):
        if isinstance(outcome, Exception):
            result.failures.append(QueryFailure(master_address=master_address, error=outcome))
        else:
            result.successes.append(QuerySuccess(master_address=master_address, addresses=outcome))

    return result


async def server_addresses_from_many(
    master_addresses: Iterable[str], timeout: Timeout
) -> List[ServerAddress]:
    """Sorted, unique server addresses from all masters that answered.

    Failed masters are logged and otherwise ignored.
    """
    found = set()

    for master_address, outcome in await _fan_out(master_addresses, timeout, server_addresses):
        if isinstance(outcome, Exception):
            logger.warning(f"Skipping {master_address}: {outcome}")
        else:
            found.update(outcome)

    return sorted(found)
