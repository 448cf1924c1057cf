"""
Error taxonomy for recipe decoding.

Every decode operation reports failures as one of these values inside a
``Failure`` outcome rather than raising them across the call boundary.
"""
from __future__ import annotations

from typing import Optional


class DecodeError(Exception):
    """Base class for all decoding failures."""
    kind = "decode"


class FormatError(DecodeError):
    """Raised when bytes do not conform to the expected recipe grammar."""
    kind = "format"


class EncodingError(DecodeError):
    """Raised when a string cannot be encoded into the fixed text encoding."""
    kind = "encoding"


class TransportError(DecodeError):
    """
    Raised when the network retrieval of a recipe document fails.

    Attributes:
        location: The URL that was being fetched, if known.
        cause: The exception reported by the transport.
    """
    kind = "transport"

    def __init__(self, message: str, location: Optional[str] = None, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.location = location
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class TransportCancelledError(TransportError):
    """Raised when the task awaiting a retrieval was cancelled."""
    pass
