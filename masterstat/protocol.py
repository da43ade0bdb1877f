"""
Master server protocol

Request and response layouts for the QuakeWorld master server status query:

    request:  63 0A 00
    response: FF FF FF FF 64 0A, then 6-byte records [ip0 ip1 ip2 ip3 port_hi port_lo]

The response carries no record count or terminator; the list ends where the
datagram ends.
"""

import logging
from typing import List

from .errors import InvalidResponse
from .models import RawServerAddress, ServerAddress

logger = logging.getLogger(__name__)

STATUS_REQUEST = bytes([99, 10, 0])
RESPONSE_HEADER = bytes([255, 255, 255, 255, 100, 10])
RECORD_SIZE = RawServerAddress.SIZE


class ResponseReader:
    """Sequential reader over the record section of a response"""

    def __init__(self, data: bytes, pos: int = 0):
        self.data = data
        self.pos = pos

    def remaining(self) -> int:
        """Get number of bytes remaining to read"""
        return len(self.data) - self.pos

    def has_record(self) -> bool:
        """Check if a full record is available"""
        return self.remaining() >= RECORD_SIZE

    def read_record(self) -> RawServerAddress:
        """Read one address record and advance past it"""
        record = RawServerAddress.from_bytes(self.data, self.pos)
        self.pos += RECORD_SIZE
        return record


def parse_response(response: bytes) -> List[ServerAddress]:
    """Parse a status response into server addresses.

    Args:
        response: Raw datagram received from a master server

    Returns:
        Server addresses in the order they appear in the response

    Raises:
        InvalidResponse: If the response does not start with RESPONSE_HEADER
    """
    if not response.startswith(RESPONSE_HEADER):
        raise InvalidResponse()

    reader = ResponseReader(response, len(RESPONSE_HEADER))
    addresses = []

    while reader.has_record():
        addresses.append(reader.read_record().to_server_address())

    if reader.remaining():
        logger.debug(f"Ignoring {reader.remaining()} trailing bytes")
    logger.debug(f"Parsed {len(addresses)} server addresses")

    return addresses
