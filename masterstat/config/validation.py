"""
Configuration validation utilities
"""

from datetime import timedelta
from typing import Tuple, Union

Timeout = Union[int, float, timedelta]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails"""
    pass


def validate_host(host: str) -> str:
    """Validate host address"""
    if not host or not isinstance(host, str):
        raise ConfigValidationError("Host must be a non-empty string")

    if len(host.strip()) == 0:
        raise ConfigValidationError("Host cannot be empty or whitespace")

    return host.strip()


def validate_port(port: int) -> int:
    """Validate port number"""
    if not isinstance(port, int) or isinstance(port, bool):
        raise ConfigValidationError("Port must be an integer")

    if port < 1 or port > 65535:
        raise ConfigValidationError("Port must be between 1 and 65535")

    return port


def validate_master_address(address: str) -> Tuple[str, int]:
    """Split a ``host:port`` master address into its parts"""
    if not isinstance(address, str):
        raise ConfigValidationError("Master address must be a string")

    host, sep, port = address.strip().rpartition(":")
    if not sep:
        raise ConfigValidationError(f"Master address must be host:port, got {address!r}")

    try:
        port_number = int(port)
    except ValueError:
        raise ConfigValidationError(f"Invalid port in master address {address!r}") from None

    return validate_host(host), validate_port(port_number)


def validate_timeout(timeout: Timeout) -> float:
    """Validate timeout value, returning seconds"""
    if isinstance(timeout, timedelta):
        timeout = timeout.total_seconds()

    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool):
        raise ConfigValidationError("Timeout must be a number or timedelta")

    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")

    return float(timeout)
