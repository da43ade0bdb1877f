"""Server address and query result data structures."""

import struct
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


@dataclass(frozen=True, order=True)
class ServerAddress:
    """Address of a game server reported by a master server.

    Ordering compares the dotted ``ip`` string first and the ``port``
    second, so ``"10.0.0.1"`` sorts before ``"2.0.0.1"``.
    """

    ip: str
    port: int

    def __post_init__(self):
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"Port out of range: {self.port}")

    @property
    def address(self) -> str:
        """Get the full server address (ip:port)."""
        return f"{self.ip}:{self.port}"

    @classmethod
    def parse(cls, text: str) -> 'ServerAddress':
        """Create from an ``ip:port`` string."""
        ip, sep, port = text.rpartition(":")
        if not sep or not ip:
            raise ValueError(f"Expected ip:port, got {text!r}")
        return cls(ip=ip, port=int(port))

    def to_json(self) -> str:
        """JSON representation is the ``ip:port`` string."""
        return self.address

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class RawServerAddress:
    """One 6-byte address record as it appears on the wire."""

    ip: bytes
    port: int

    FORMAT = struct.Struct(">4sH")
    SIZE = FORMAT.size

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> 'RawServerAddress':
        """Unpack one record starting at ``offset``."""
        ip, port = cls.FORMAT.unpack_from(data, offset)
        return cls(ip=ip, port=port)

    def to_server_address(self) -> ServerAddress:
        return ServerAddress(ip=".".join(str(octet) for octet in self.ip), port=self.port)

    def __str__(self) -> str:
        return str(self.to_server_address())


@dataclass
class QuerySuccess:
    """A master server that answered with a valid server list."""
    master_address: str
    addresses: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'master_address': self.master_address,
            'server_addresses': list(self.addresses),
        }


@dataclass
class QueryFailure:
    """A master server whose query raised an error."""
    master_address: str
    error: BaseException

    def to_dict(self) -> Dict[str, Any]:
        return {
            'master_address': self.master_address,
            'error': str(self.error),
        }


@dataclass
class MultiQueryResult:
    """Outcome of querying several master servers, one entry per master."""

    successes: List[QuerySuccess] = field(default_factory=list)
    failures: List[QueryFailure] = field(default_factory=list)

    def successful_queries(self) -> Iterator[QuerySuccess]:
        """Iterate over successful queries."""
        return iter(self.successes)

    def failed_queries(self) -> Iterator[QueryFailure]:
        """Iterate over failed queries."""
        return iter(self.failures)

    def server_addresses(self) -> List[str]:
        """Unique server addresses from all successful queries, sorted as strings."""
        return sorted({
            address
            for success in self.successes
            for address in success.addresses
        })

    def __len__(self) -> int:
        return len(self.successes) + len(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary"""
        return {
            'server_addresses': self.server_addresses(),
            'successes': [success.to_dict() for success in self.successes],
            'failures': [failure.to_dict() for failure in self.failures],
        }
