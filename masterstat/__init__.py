"""
masterstat - Get server addresses from QuakeWorld master servers

Usage:
    import asyncio
    from masterstat import query

    addresses = asyncio.run(query("master.quakeworld.nu:27000", 2.0))
    print(f"found {len(addresses)} server addresses")

Or from many masters at once:
    from masterstat import query_multiple

    masters = ["master.quakeworld.nu:27000", "master.quakeservers.net:27000"]
    result = asyncio.run(query_multiple(masters, 2.0))

    for success in result.successful_queries():
        print(f"{success.master_address}: {len(success.addresses)} servers")
    for failure in result.failed_queries():
        print(f"{failure.master_address}: {failure.error}")

    print(result.server_addresses())  # sorted, without duplicates
"""

__version__ = "0.7.0"

from .config import ConfigValidationError, QueryConfig
from .errors import (
    BindFailed,
    InvalidResponse,
    MasterstatError,
    ProtocolError,
    ReceiveFailed,
    SendFailed,
    TimeoutReached,
    TransportError,
)
from .models import (
    MultiQueryResult,
    QueryFailure,
    QuerySuccess,
    RawServerAddress,
    ServerAddress,
)
from .protocol import parse_response
from .query import query, server_addresses
from .query_multiple import query_multiple, server_addresses_from_many
from .transport import Options, send_and_receive

__all__ = [
    "query",
    "query_multiple",
    "server_addresses",
    "server_addresses_from_many",
    "parse_response",
    "send_and_receive",
    "Options",
    "ServerAddress",
    "RawServerAddress",
    "QuerySuccess",
    "QueryFailure",
    "MultiQueryResult",
    "QueryConfig",
    "MasterstatError",
    "TransportError",
    "BindFailed",
    "SendFailed",
    "ReceiveFailed",
    "TimeoutReached",
    "ProtocolError",
    "InvalidResponse",
    "ConfigValidationError",
]
