# src/chaingate/exceptions.py
from enum import Enum
from typing import Optional


class GatewayError(Exception):
    """Base exception class for gateway-related errors"""
    pass


class ValidationError(GatewayError):
    """Raised when request input fails validation"""
    pass


class ConfigError(GatewayError):
    """Raised when a configuration value cannot be used"""
    pass


class UpstreamErrorKind(Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    STATUS = "status"


class UpstreamError(GatewayError):
    """Raised when a call to the upstream explorer fails.

    Only STATUS failures carry the upstream HTTP status code; transport and
    decoding failures have none.
    """

    def __init__(self, message: str, kind: UpstreamErrorKind,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code if kind is UpstreamErrorKind.STATUS else None

    @classmethod
    def transport(cls, message: str) -> "UpstreamError":
        return cls(message, UpstreamErrorKind.TRANSPORT)

    @classmethod
    def decode(cls, message: str) -> "UpstreamError":
        return cls(message, UpstreamErrorKind.DECODE)

    @classmethod
    def status(cls, message: str, status_code: int) -> "UpstreamError":
        return cls(message, UpstreamErrorKind.STATUS, status_code)

    def __repr__(self) -> str:
        return f"UpstreamError(kind={self.kind.value!r}, status_code={self.status_code!r}, message={str(self)!r})"
