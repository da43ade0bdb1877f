"""
masterstat - UDP transport
Sends one datagram and waits for one reply, bounded by a timeout.
"""

import asyncio
import logging
import socket
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .config.validation import ConfigValidationError, validate_master_address
from .errors import BindFailed, ReceiveFailed, SendFailed, TimeoutReached

logger = logging.getLogger(__name__)

Target = Union[str, Tuple[str, int]]

LOCAL_ADDRESS = ("0.0.0.0", 0)


@dataclass
class Options:
    """Per-call transport settings"""
    timeout: float
    buffer_size: int


class ResponseProtocol(asyncio.DatagramProtocol):
    """Datagram protocol that resolves ``response`` with the first datagram."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.transport: Optional[asyncio.DatagramTransport] = None
        self.response: asyncio.Future = loop.create_future()

    def connection_made(self, transport):
        self.transport = transport

    def datagram_received(self, data, addr):
        if not self.response.done():
            logger.debug(f"Received {len(data)} bytes from {addr[0]}:{addr[1]}")
            self.response.set_result(data)

    def error_received(self, exc):
        if not self.response.done():
            self.response.set_exception(exc)

    def connection_lost(self, exc):
        if exc is not None and not self.response.done():
            self.response.set_exception(exc)


async def send_and_receive(target: Target, message: bytes, options: Options) -> bytes:
    """Send ``message`` to ``target`` and return the first datagram received.

    Args:
        target: ``host:port`` string or ``(host, port)`` tuple
        message: Datagram payload
        options: Timeout in seconds and maximum number of bytes to return

    Returns:
        The received datagram, truncated to ``options.buffer_size``

    Raises:
        BindFailed: The local socket could not be bound
        SendFailed: The target could not be resolved or the send failed
        ReceiveFailed: The socket reported an error before a reply arrived
        TimeoutReached: Nothing arrived within ``options.timeout``
    """
    loop = asyncio.get_running_loop()

    try:
        transport, protocol = await loop.create_datagram_endpoint(
            lambda: ResponseProtocol(loop),
            local_addr=LOCAL_ADDRESS,
            family=socket.AF_INET,
        )
    except OSError as e:
        raise BindFailed(e) from e

    try:
        address = await _resolve(loop, target)
        try:
            transport.sendto(message, address)
        except (OSError, ValueError, TypeError) as e:
            raise SendFailed(e) from e

        # sendto reports OS errors through error_received before returning
        if protocol.response.done() and protocol.response.exception() is not None:
            error = protocol.response.exception()
            raise SendFailed(error) from error
        logger.debug(f"Sent {len(message)} bytes to {address[0]}:{address[1]}")

        response = await _race(protocol.response, options.timeout)
        return bytes(response[:options.buffer_size])
    finally:
        transport.close()


async def _resolve(loop: asyncio.AbstractEventLoop, target: Target) -> Tuple[str, int]:
    """Resolve a target to an IPv4 socket address"""
    try:
        if isinstance(target, str):
            host, port = validate_master_address(target)
        else:
            host, port = target
        infos = await loop.getaddrinfo(host, port, family=socket.AF_INET, type=socket.SOCK_DGRAM)
    except (ConfigValidationError, OSError, ValueError, TypeError) as e:
        raise SendFailed(e) from e

    if not infos:
        raise SendFailed(OSError(f"no addresses found for {target}"))

    return infos[0][4][:2]


async def _race(response: asyncio.Future, timeout: float) -> bytes:
    """Wait for ``response`` or ``timeout``, whichever settles first"""
    timer = asyncio.ensure_future(asyncio.sleep(timeout))
    try:
        done, _ = await asyncio.wait({response, timer}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        timer.cancel()

    if response not in done:
        response.cancel()
        raise TimeoutReached()

    error = response.exception()
    if error is not None:
        raise ReceiveFailed(error) from error

    return response.result()
