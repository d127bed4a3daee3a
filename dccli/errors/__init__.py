"""Error hierarchy and reporting helpers."""

from .handling import (  # noqa: F401
    categorize_error,
    format_error_chain,
    format_traceback,
    log_error,
)
from .internal import (  # noqa: F401
    DecodeError,
    InternalError,
    IRCConnectionError,
    MalformedOfferError,
    NetworkError,
    ParsingError,
    TransferConnectError,
    TransferError,
)

__all__ = [
    "DecodeError",
    "InternalError",
    "IRCConnectionError",
    "MalformedOfferError",
    "NetworkError",
    "ParsingError",
    "TransferConnectError",
    "TransferError",
    "categorize_error",
    "format_error_chain",
    "format_traceback",
    "log_error",
]
