"""Receiving a file over a DCC SEND connection."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable
from pathlib import Path

from ..constants import DCC_CONNECT_TIMEOUT, DCC_READ_SIZE
from ..errors import TransferConnectError, TransferError
from ..irc.models import TransferDescriptor, is_bare_filename
from ..logs.logger import logger
from .progress import TransferProgress

ProgressCallback = Callable[[TransferProgress], None]


class DccDownload:
    """Owns one DCC connection and the file it is written to.

    There is no read timeout once connected and no checksum or resume; an
    interrupted transfer leaves the partial file behind.
    """

    def __init__(
        self,
        descriptor: TransferDescriptor,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        *,
        directory: Path | None = None,
        read_size: int = DCC_READ_SIZE,
    ) -> None:
        self.descriptor = descriptor
        self.reader = reader
        self.writer = writer
        self.directory = directory or Path.cwd()
        self.read_size = read_size
        self.progress = TransferProgress(size=descriptor.size)

    @property
    def filename(self) -> str:
        return self.descriptor.filename

    @property
    def size(self) -> int:
        return self.descriptor.size

    @property
    def path(self) -> Path:
        """Target file inside ``directory``; names that would leave it are refused.

        Raises:
            TransferError: The offered filename is not a bare file name.
        """
        if not is_bare_filename(self.filename):
            raise TransferError(
                f"refusing to write outside the download directory: {self.filename!r}",
                data={"filename": self.filename},
            )
        return self.directory / self.filename

    @classmethod
    async def open(
        cls,
        descriptor: TransferDescriptor,
        *,
        timeout: float = DCC_CONNECT_TIMEOUT,
        directory: Path | None = None,
    ) -> DccDownload:
        """Connect to the offering peer within ``timeout`` seconds."""
        logger.log_event(
            "dcc",
            "connect_start",
            level=logging.DEBUG,
            address=descriptor.address,
            port=descriptor.port,
        )
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(descriptor.address, descriptor.port),
                timeout=timeout,
            )
        except TimeoutError as e:
            raise TransferConnectError(
                f"timed out after {timeout:g}s connecting to "
                f"{descriptor.address}:{descriptor.port}",
                data={"address": descriptor.address, "port": descriptor.port},
            ) from e
        except OSError as e:
            raise TransferConnectError(
                f"could not connect to {descriptor.address}:{descriptor.port}",
                data={"address": descriptor.address, "port": descriptor.port},
            ) from e
        logger.log_event(
            "dcc",
            "connected",
            level=logging.DEBUG,
            address=descriptor.address,
            port=descriptor.port,
        )
        return cls(descriptor, reader, writer, directory=directory)

    async def run(self, on_progress: ProgressCallback | None = None) -> TransferProgress:
        """Read exactly ``size`` bytes into the target file.

        Raises:
            TransferError: The peer closed or the read failed before ``size``
                bytes arrived, or the file could not be written.
        """
        try:
            with self.path.open("wb") as out:
                await self._receive_into(out, on_progress)
                out.flush()
                os.fsync(out.fileno())
        except OSError as e:
            raise TransferError(
                f"failed to download \"{self.filename}\"",
                data={"received": self.progress.received, "size": self.size},
            ) from e
        finally:
            await self._close()
        return self.progress

    async def _receive_into(self, out, on_progress: ProgressCallback | None) -> None:
        progress = self.progress
        if on_progress is not None:
            on_progress(progress)
        while not progress.done:
            chunk = await self.reader.read(min(self.read_size, progress.remaining))
            if not chunk:
                raise TransferError(
                    f"connection closed after {progress.received} of "
                    f"{progress.size} bytes",
                    data={"received": progress.received, "size": progress.size},
                )
            out.write(chunk)
            progress.advance(len(chunk))
            if on_progress is not None:
                on_progress(progress)

    async def _close(self) -> None:
        if self.writer.is_closing():
            return
        self.writer.close()
        try:
            await self.writer.wait_closed()
        except OSError:
            # The peer may already have reset the socket; nothing is pending.
            pass
