#!/usr/bin/env python3
"""
Main entry point for dccli
"""

import asyncio
import logging
import sys

from .config import SessionConfig, parse_args
from .dcc import DccDownload, ProgressReporter, TransferProgress
from .errors import (
    IRCConnectionError,
    format_error_chain,
    format_traceback,
    log_error,
)
from .irc.session import IRCSession, SessionStatus
from .logging_config import LoggerConfigurator
from .logs.logger import logger


def start_transfer(
    download: DccDownload, config: SessionConfig
) -> "asyncio.Task[TransferProgress]":
    """Run ``download`` as its own task so the session can be closed meanwhile."""
    reporter = None if config.verbose else ProgressReporter(download.filename)
    logger.log_event("app", "transfer_started", filename=download.filename)
    return asyncio.create_task(
        download.run(reporter), name=f"dcc:{download.filename}"
    )


async def main(config: SessionConfig) -> list[TransferProgress]:
    """Request the pack, hand the offer to a transfer task and wait for it.

    Returns the final progress of every transfer (at most one per run).
    Any fatal error propagates to the caller unchanged.
    """
    logger.log_event(
        "app",
        "start",
        pack=config.pack,
        bot=config.bot,
        server=config.server,
        port=config.port,
    )
    logger.log_event("app", "connecting", server=config.server)
    try:
        session = await IRCSession.connect(config)
    except IRCConnectionError as e:
        raise IRCConnectionError("failed to connect to IRC server", data=e.data) from e

    transfers: list[asyncio.Task[TransferProgress]] = []
    while True:
        result = await session.poll()
        if result.status is SessionStatus.CONNECTION_CLOSED:
            logger.log_event("app", "session_closed", level=logging.DEBUG)
            break
        if result.status is SessionStatus.NEW_TRANSFER and result.download:
            transfers.append(start_transfer(result.download, config))
            await session.quit()
    await session.quit()

    results = [await task for task in transfers]
    if results:
        logger.log_event("app", "done", level=logging.DEBUG)
    return results


def run(argv: list[str] | None = None) -> int:
    """Synchronous entry point; returns the process exit status."""
    config = parse_args(argv)
    LoggerConfigurator(verbose=config.verbose).configure()
    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        return 130
    except Exception as e:
        if config.verbose:
            log_error("Download failed", e)
        print(f"dccli: {format_error_chain(e)}", file=sys.stderr)
        if config.verbose:
            print(f"\nStack backtrace:\n{format_traceback(e)}", file=sys.stderr, end="")
        return 1
    return 0


def cli() -> None:
    sys.exit(run())


if __name__ == "__main__":
    cli()
