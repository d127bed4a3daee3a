"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class SessionState(Enum):
    CONNECTING = auto()
    REGISTERED = auto()
    AWAITING_OFFER = auto()
    OFFER_RECEIVED = auto()
    CLOSED = auto()


@dataclass(frozen=True, slots=True)
class Ping:
    token: str


@dataclass(frozen=True, slots=True)
class ModeNotice:
    """User modes granted by the server; used as the post-registration trigger."""


@dataclass(frozen=True, slots=True)
class DccOffer:
    filename: str
    address: str
    port: int
    size: int


@dataclass(frozen=True, slots=True)
class Unrecognized:
    pass


ClassifiedMessage = Ping | ModeNotice | DccOffer | Unrecognized


@dataclass(frozen=True, slots=True)
class TransferDescriptor:
    """Everything needed to open and complete one DCC transfer."""

    filename: str
    address: str
    port: int
    size: int

    @classmethod
    def from_offer(cls, offer: DccOffer) -> TransferDescriptor:
        return cls(
            filename=offer.filename,
            address=offer.address,
            port=offer.port,
            size=offer.size,
        )


def is_bare_filename(name: str) -> bool:
    """True when ``name`` stays inside the directory it is joined to."""
    if name in ("", ".", ".."):
        return False
    return not any(sep in name for sep in ("/", "\\", "\x00"))
