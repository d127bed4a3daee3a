"""Command line parsing into a :class:`SessionConfig`."""

from __future__ import annotations

import argparse
from importlib import metadata

from pydantic import ValidationError

from ..constants import DEFAULT_NICK, DEFAULT_PORT, DEFAULT_SERVER
from .model import SessionConfig


def _version() -> str:
    try:
        return metadata.version("dccli")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dccli", description="Download an XDCC pack from an IRC bot."
    )
    parser.add_argument("bot", help="Bot to receive DCC from")
    parser.add_argument("pack", type=int, help="XDCC pack number")
    parser.add_argument(
        "-c",
        "--channel",
        action="append",
        default=[],
        metavar="CHAN",
        help="Add IRC channel to join (omit '#'); repeat for more, each entry is joined as given",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=DEFAULT_PORT,
        metavar="PORT",
        help="Set IRC connection port",
    )
    parser.add_argument(
        "-s",
        "--server",
        default=DEFAULT_SERVER,
        metavar="ADDR",
        help="Set IRC server address",
    )
    parser.add_argument(
        "-n",
        "--nick",
        default=DEFAULT_NICK,
        metavar="NICK",
        help="Set IRC nick",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show more information"
    )
    parser.add_argument("-V", "--version", action="version", version=_version())
    return parser


def parse_args(argv: list[str] | None = None) -> SessionConfig:
    """Parse ``argv`` and validate it into a frozen :class:`SessionConfig`.

    Validation failures are reported through ``parser.error`` (exit status 2).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return SessionConfig(
            server=args.server,
            port=args.port,
            bot=args.bot,
            pack=args.pack,
            channels=args.channel,
            verbose=args.verbose,
            nick=args.nick,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        parser.error(problems)
        raise  # parser.error exits; keeps type checkers happy
