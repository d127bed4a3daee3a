"""Classification of IRC lines into the messages the session reacts to."""

from __future__ import annotations

import ipaddress
import re

from ..errors import MalformedOfferError
from .models import (
    ClassifiedMessage,
    DccOffer,
    ModeNotice,
    Ping,
    Unrecognized,
    is_bare_filename,
)

PING_RE = re.compile(r"^(?:\S+ )?PING (.+)$")
MODE_RE = re.compile(r"^(?:\S+ )?MODE \S+ :\S+$")
# Three trailing numeric-looking fields; a number that does not parse is fatal,
# a payload without this shape is ordinary chat.
DCC_FIELDS_RE = re.compile(
    r"^(.+?)\s+([+-]?\d\S*)\s+([+-]?\d\S*)\s+([+-]?\d\S*)$"
)
DCC_SEND_MARKER = "DCC SEND "
CTCP_DELIMITER = "\x01"

_MAX_ADDRESS = 0xFFFFFFFF
_MAX_PORT = 0xFFFF


def classify(line: str) -> ClassifiedMessage:
    """Map a stripped IRC line to exactly one message, first match wins.

    Priority: PING, then the MODE notice, then a DCC SEND offer anywhere in
    the line. A ``DCC SEND`` mention without the trailing address, port and
    size fields (an XDCC announcement in a channel, say) is not an offer.
    The sender of an offer is not checked against the bot nick.

    Raises:
        MalformedOfferError: The line has the shape of an offer but its
            fields do not parse.
    """
    ping = PING_RE.match(line)
    if ping:
        return Ping(token=ping.group(1))
    if MODE_RE.match(line):
        return ModeNotice()
    if DCC_SEND_MARKER in line and DCC_FIELDS_RE.match(_offer_payload(line)):
        return parse_dcc_send(line)
    return Unrecognized()


def parse_dcc_send(line: str) -> DccOffer:
    """Extract ``<filename> <address> <port> <size>`` following ``DCC SEND``.

    The filename may contain spaces and may be wrapped in double quotes. It
    must be a bare file name; anything that names a directory is rejected.
    The address is a 32-bit IPv4 address written as a decimal integer.
    """
    payload = _offer_payload(line)
    fields = DCC_FIELDS_RE.match(payload)
    if not fields:
        raise MalformedOfferError(
            "DCC SEND offer is missing fields", data={"offer": payload}
        )
    raw_filename, raw_address, raw_port, raw_size = fields.groups()

    filename = raw_filename.strip().strip('"')
    if not filename:
        raise MalformedOfferError(
            "DCC SEND offer has an empty filename", data={"offer": payload}
        )
    if not is_bare_filename(filename):
        raise MalformedOfferError(
            f"DCC SEND filename is not a plain file name: {filename!r}",
            data={"offer": payload},
        )
    address = _parse_unsigned(raw_address, "address", _MAX_ADDRESS)
    port = _parse_unsigned(raw_port, "port", _MAX_PORT)
    size = _parse_unsigned(raw_size, "size")

    return DccOffer(
        filename=filename,
        address=str(ipaddress.IPv4Address(address)),
        port=port,
        size=size,
    )


def _offer_payload(line: str) -> str:
    payload = line.split(DCC_SEND_MARKER, 1)[1]
    return payload.split(CTCP_DELIMITER, 1)[0].strip()


def _parse_unsigned(raw: str, field: str, maximum: int | None = None) -> int:
    if not raw.isascii() or not raw.isdigit():
        raise MalformedOfferError(
            f"DCC SEND {field} is not an unsigned integer: {raw!r}",
            data={"field": field},
        )
    value = int(raw)
    if maximum is not None and value > maximum:
        raise MalformedOfferError(
            f"DCC SEND {field} out of range: {value}", data={"field": field}
        )
    return value
