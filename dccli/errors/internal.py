"""Centralized internal error hierarchy.

Every fatal condition in the client is expressed as one of these exceptions.
Low-level errors (``OSError``, ``TimeoutError``, ``UnicodeDecodeError``,
``ValueError``) are wrapped at the boundary with ``raise ... from e`` so the
full causal chain reaches the top-level driver.

Classes:
  InternalError         – Base for all internal errors.
  NetworkError          – Connection and transport failures.
  IRCConnectionError    – Control connection could not be opened or read.
  TransferConnectError  – DCC peer could not be reached.
  TransferError         – DCC stream failed before the declared size.
  ParsingError          – Inbound data that cannot be interpreted.
  DecodeError           – Non-text bytes where an IRC line was expected.
  MalformedOfferError   – DCC SEND offer with unusable fields.

No error in this hierarchy is retried; the client has no local recovery.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors."""


class IRCConnectionError(NetworkError):
    """Failure to open, read from or write to the IRC control connection."""


class TransferConnectError(NetworkError):
    """Failure to connect to the peer advertised in a DCC SEND offer."""


class TransferError(NetworkError):
    """Exception raised when a DCC transfer ends before the declared size.

    The partially written file is left on disk.
    """


class ParsingError(InternalError):
    """Exception raised for inbound data that cannot be interpreted."""


class DecodeError(ParsingError):
    """A framed IRC line is not valid UTF-8 text."""


class MalformedOfferError(ParsingError):
    """A DCC SEND offer whose address, port or size fields do not parse."""


__all__ = [
    "InternalError",
    "NetworkError",
    "IRCConnectionError",
    "TransferConnectError",
    "TransferError",
    "ParsingError",
    "DecodeError",
    "MalformedOfferError",
]
