"""Shared fixtures: session configs and loopback peers standing in for IRC and DCC."""

from __future__ import annotations

import asyncio
import logging
import socket
from collections.abc import Awaitable, Callable

import pytest
import pytest_asyncio

from dccli.config import SessionConfig
from tests.fixtures.peers import LOCALHOST


@pytest.fixture
def session_config() -> SessionConfig:
    return SessionConfig(
        server=LOCALHOST,
        port=6667,
        bot="xbot",
        pack=5,
        channels=["foo", "bar"],
    )


@pytest.fixture
def unused_port() -> int:
    """A loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((LOCALHOST, 0))
        return sock.getsockname()[1]


Handler = Callable[[asyncio.StreamReader, asyncio.StreamWriter], Awaitable[None]]


@pytest_asyncio.fixture
async def serve():
    """Start loopback servers running ``handler``; returns the bound port."""
    servers: list[asyncio.Server] = []

    async def start(handler: Handler) -> int:
        async def guarded(reader, writer):
            try:
                await handler(reader, writer)
            finally:
                writer.close()

        server = await asyncio.start_server(guarded, LOCALHOST, 0)
        servers.append(server)
        return server.sockets[0].getsockname()[1]

    yield start

    for server in servers:
        server.close()
    for server in servers:
        await asyncio.wait_for(server.wait_closed(), timeout=2)


@pytest.fixture(autouse=True)
def _drop_console_handler():
    """Remove the console handler a ``run()`` call installs on the root logger."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_dccli_console", False):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
