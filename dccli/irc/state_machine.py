"""Session transitions, independent of socket I/O.

The session drives this object with classified messages and writes whatever
lines it returns, in order, to the control connection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import SessionConfig
from ..logs.logger import logger
from .models import (
    ClassifiedMessage,
    DccOffer,
    ModeNotice,
    Ping,
    SessionState,
    TransferDescriptor,
)


@dataclass(slots=True)
class Reaction:
    outbound: list[str] = field(default_factory=list)
    offer: TransferDescriptor | None = None


class SessionStateMachine:
    """``CONNECTING -> REGISTERED -> AWAITING_OFFER -> OFFER_RECEIVED -> CLOSED``.

    Each state has its own handler; messages that a state does not expect are
    ignored. After an offer has been produced nothing but ``QUIT`` is emitted.
    """

    def __init__(self, config: SessionConfig) -> None:
        self.config = config
        self._state = SessionState.CONNECTING
        self._handlers: dict[
            SessionState, Callable[[ClassifiedMessage], Reaction]
        ] = {
            SessionState.REGISTERED: self._on_registered,
            SessionState.AWAITING_OFFER: self._on_awaiting_offer,
        }

    @property
    def state(self) -> SessionState:
        return self._state

    def _set_state(self, new_state: SessionState) -> None:
        if self._state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                old_state=self._state.name,
                new_state=new_state.name,
            )
            self._state = new_state

    def register(self) -> list[str]:
        """Registration lines; registration completion is inferred from MODE later."""
        if self._state is not SessionState.CONNECTING:
            return []
        nick = self.config.nick
        self._set_state(SessionState.REGISTERED)
        return [f"USER {nick} 0 * {nick}", f"NICK {nick}"]

    def handle(self, message: ClassifiedMessage) -> Reaction:
        handler = self._handlers.get(self._state)
        if handler is None:
            if isinstance(message, DccOffer):
                logger.log_event(
                    "irc",
                    "ignored_offer",
                    level=logging.DEBUG,
                    state=self._state.name,
                )
            return Reaction()
        return handler(message)

    def quit(self) -> list[str]:
        if self._state is SessionState.CLOSED:
            return []
        self._set_state(SessionState.CLOSED)
        return ["QUIT"]

    def peer_closed(self) -> None:
        self._set_state(SessionState.CLOSED)

    def _on_registered(self, message: ClassifiedMessage) -> Reaction:
        if isinstance(message, Ping):
            return self._pong(message)
        if isinstance(message, ModeNotice):
            outbound = [f"JOIN #{channel}" for channel in self.config.channels]
            outbound.append(
                f"PRIVMSG {self.config.bot} :XDCC GET #{self.config.pack}"
            )
            self._set_state(SessionState.AWAITING_OFFER)
            logger.log_event("irc", "waiting_offer")
            return Reaction(outbound=outbound)
        if isinstance(message, DccOffer):
            logger.log_event(
                "irc", "ignored_offer", level=logging.DEBUG, state=self._state.name
            )
        return Reaction()

    def _on_awaiting_offer(self, message: ClassifiedMessage) -> Reaction:
        if isinstance(message, Ping):
            return self._pong(message)
        if isinstance(message, DccOffer):
            # TODO: compare the offer's sender with config.bot once the
            # classifier keeps the line prefix.
            descriptor = TransferDescriptor.from_offer(message)
            logger.log_event(
                "irc",
                "offer",
                filename=descriptor.filename,
                size=descriptor.size,
                address=descriptor.address,
                port=descriptor.port,
            )
            self._set_state(SessionState.OFFER_RECEIVED)
            return Reaction(offer=descriptor)
        return Reaction()

    @staticmethod
    def _pong(message: Ping) -> Reaction:
        return Reaction(outbound=[f"PONG {message.token}"])
