"""IRC subsystem package.

Contains line framing, message classification and the session state machine.
The socket-owning :class:`~dccli.irc.session.IRCSession` lives in
``dccli.irc.session`` and is not re-exported here, since it depends on the
DCC package which in turn imports these models.
"""

from .classifier import classify, parse_dcc_send  # noqa: F401
from .framer import LineFramer  # noqa: F401
from .models import (  # noqa: F401
    ClassifiedMessage,
    DccOffer,
    ModeNotice,
    Ping,
    SessionState,
    TransferDescriptor,
    Unrecognized,
)
from .state_machine import Reaction, SessionStateMachine  # noqa: F401

__all__ = [
    "ClassifiedMessage",
    "DccOffer",
    "LineFramer",
    "ModeNotice",
    "Ping",
    "Reaction",
    "SessionState",
    "SessionStateMachine",
    "TransferDescriptor",
    "Unrecognized",
    "classify",
    "parse_dcc_send",
]
