"""
Single master server query
"""

import logging
from typing import List

from .config.validation import Timeout, validate_timeout
from .models import ServerAddress
from .protocol import STATUS_REQUEST, parse_response
from .transport import Options, send_and_receive

logger = logging.getLogger(__name__)

RECEIVE_BUFFER_SIZE = 64 * 1024


async def server_addresses(master_address: str, timeout: Timeout) -> List[ServerAddress]:
    """
    Get server addresses from a single master server.

    Args:
        master_address: Master server as ``host:port``
        timeout: Seconds (or timedelta) to wait for the reply

    Returns:
        Addresses in the order the master listed them, duplicates included

    Usage:
        addresses = await server_addresses("master.quakeworld.nu:27000", 2.0)
    """
    options = Options(timeout=validate_timeout(timeout), buffer_size=RECEIVE_BUFFER_SIZE)

    logger.debug(f"Querying {master_address} (timeout {options.timeout}s)")
    response = await send_and_receive(master_address, STATUS_REQUEST, options)
    addresses = parse_response(response)
    logger.debug(f"{master_address} listed {len(addresses)} servers")

    return addresses


async def query(master_address: str, timeout: Timeout) -> List[str]:
    """Get server addresses from a single master server as ``ip:port`` strings."""
    return [str(address) for address in await server_addresses(master_address, timeout)]
