"""
Error types raised by masterstat
"""

from typing import Optional


class MasterstatError(Exception):
    """Base exception for all masterstat errors"""
    pass


class TransportError(MasterstatError):
    """Base exception for UDP transport failures

    The underlying OS error, when there is one, is kept as ``cause``.
    """

    message = "transport error"

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        if cause is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {cause}")


class BindFailed(TransportError):
    """Raised when the local UDP socket cannot be bound"""
    message = "failed to bind socket"


class SendFailed(TransportError):
    """Raised when the request cannot be sent (includes address resolution)"""
    message = "failed to send message"


class ReceiveFailed(TransportError):
    """Raised when the socket reports an error while waiting for a reply"""
    message = "failed to receive message"


class TimeoutReached(TransportError):
    """Raised when no reply arrives before the deadline"""
    message = "timeout reached while waiting for response"


class ProtocolError(MasterstatError):
    """Base exception for protocol-related errors"""
    pass


class InvalidResponse(ProtocolError):
    """Raised when a response does not start with the expected header"""

    def __init__(self, message: str = "Invalid response"):
        super().__init__(message)
