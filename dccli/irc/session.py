"""Control connection to the IRC server."""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass

from ..config import SessionConfig
from ..constants import (
    DCC_CONNECT_TIMEOUT,
    IRC_CONNECT_TIMEOUT,
    IRC_POLL_TIMEOUT,
    IRC_READ_SIZE,
    IRC_WRITE_TIMEOUT,
)
from ..dcc.transfer import DccDownload
from ..errors import IRCConnectionError, TransferConnectError
from ..logs.logger import logger
from .classifier import classify
from .framer import LineFramer
from .models import SessionState
from .state_machine import SessionStateMachine


class SessionStatus(enum.Enum):
    IDLE = enum.auto()
    CONNECTION_CLOSED = enum.auto()
    NEW_TRANSFER = enum.auto()


@dataclass(frozen=True, slots=True)
class PollResult:
    status: SessionStatus
    download: DccDownload | None = None


IDLE = PollResult(SessionStatus.IDLE)
CONNECTION_CLOSED = PollResult(SessionStatus.CONNECTION_CLOSED)


class IRCSession:
    """Reads the control connection and feeds the state machine.

    Each :meth:`poll` waits at most ``poll_timeout`` seconds for data so the
    caller can do other work between polls.
    """

    def __init__(
        self,
        config: SessionConfig,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        *,
        poll_timeout: float = IRC_POLL_TIMEOUT,
        dcc_connect_timeout: float = DCC_CONNECT_TIMEOUT,
    ) -> None:
        self.config = config
        self.reader = reader
        self.writer = writer
        self.poll_timeout = poll_timeout
        self.dcc_connect_timeout = dcc_connect_timeout
        self.framer = LineFramer()
        self.machine = SessionStateMachine(config)

    @property
    def state(self) -> SessionState:
        return self.machine.state

    @classmethod
    async def connect(
        cls,
        config: SessionConfig,
        *,
        timeout: float = IRC_CONNECT_TIMEOUT,
        **kwargs,
    ) -> IRCSession:
        """Open the control connection and send the registration lines."""
        logger.log_event(
            "irc", "connect_start", level=logging.DEBUG, server=config.server, port=config.port
        )
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(config.server, config.port),
                timeout=timeout,
            )
        except TimeoutError as e:
            raise IRCConnectionError(
                f"timed out after {timeout:g}s connecting to {config.server}:{config.port}",
                data={"server": config.server, "port": config.port},
            ) from e
        except OSError as e:
            raise IRCConnectionError(
                f"could not connect to {config.server}:{config.port}",
                data={"server": config.server, "port": config.port},
            ) from e

        session = cls(config, reader, writer, **kwargs)
        await session._send_lines(session.machine.register())
        logger.log_event(
            "irc",
            "connected",
            level=logging.DEBUG,
            server=config.server,
            port=config.port,
            nick=config.nick,
        )
        return session

    async def poll(self) -> PollResult:
        """Read once from the server and react to every completed line.

        Returns ``IDLE`` when nothing arrived in time, ``CONNECTION_CLOSED``
        when the server closed the connection and ``NEW_TRANSFER`` with an
        open :class:`DccDownload` once an offer has been accepted.
        """
        if self.machine.state in (SessionState.CLOSED, SessionState.OFFER_RECEIVED):
            return CONNECTION_CLOSED if self.machine.state is SessionState.CLOSED else IDLE

        try:
            data = await asyncio.wait_for(
                self.reader.read(IRC_READ_SIZE), timeout=self.poll_timeout
            )
        except TimeoutError:
            return IDLE
        except OSError as e:
            raise IRCConnectionError("failed to read from IRC server") from e

        if not data:
            logger.log_event("irc", "peer_closed", level=logging.DEBUG)
            self.machine.peer_closed()
            self._close_transport()
            return CONNECTION_CLOSED

        for line in self.framer.feed(data):
            logger.log_event("irc", "recv", level=logging.DEBUG, line=line)
            reaction = self.machine.handle(classify(line))
            await self._send_lines(reaction.outbound)
            if reaction.offer is not None:
                try:
                    download = await DccDownload.open(
                        reaction.offer, timeout=self.dcc_connect_timeout
                    )
                except TransferConnectError as e:
                    raise TransferConnectError(
                        "failed to initialise dcc connection", data=e.data
                    ) from e
                # Lines after the offer are not acted upon.
                return PollResult(SessionStatus.NEW_TRANSFER, download)
        return IDLE

    async def quit(self) -> None:
        """Send ``QUIT`` and close the control connection."""
        lines = self.machine.quit()
        if lines:
            logger.log_event("irc", "quit", level=logging.DEBUG)
            try:
                await self._send_lines(lines)
            finally:
                self._close_transport()
        await self._wait_closed()

    async def _send_lines(self, lines: list[str]) -> None:
        for line in lines:
            await self.send_line(line)

    async def send_line(self, message: str) -> None:
        logger.log_event("irc", "send", level=logging.DEBUG, line=message)
        self.writer.write(f"{message}\r\n".encode("utf-8"))
        try:
            await asyncio.wait_for(self.writer.drain(), timeout=IRC_WRITE_TIMEOUT)
        except TimeoutError as e:
            raise IRCConnectionError(
                f"timed out after {IRC_WRITE_TIMEOUT:g}s sending to IRC server"
            ) from e
        except OSError as e:
            raise IRCConnectionError("failed to write to IRC server") from e

    def _close_transport(self) -> None:
        if not self.writer.is_closing():
            self.writer.close()

    async def _wait_closed(self) -> None:
        try:
            await self.writer.wait_closed()
        except OSError:
            # Already reset by the server; the connection is gone either way.
            pass
