from __future__ import annotations

import pytest

from dccli.errors import DecodeError
from dccli.irc.framer import LineFramer

STREAM = (
    b":irc.example.net NOTICE * :*** Looking up your hostname...\r\n"
    b"PING :abc123\r\n"
    b":TestTest MODE TestTest :+iw\r\n"
    b":xbot PRIVMSG TestTest :\x01DCC SEND \"movie file.mkv\" 3232235777 5001 104857600\x01\r\n"
    b":caf\xc3\xa9 PRIVMSG #foo :na\xc3\xafve\r\n"
)


def _feed_all(chunks: list[bytes]) -> list[str]:
    framer = LineFramer()
    lines: list[str] = []
    for chunk in chunks:
        lines.extend(framer.feed(chunk))
    return lines


def test_single_chunk_yields_all_lines():
    lines = _feed_all([STREAM])
    assert lines == [
        ":irc.example.net NOTICE * :*** Looking up your hostname...",
        "PING :abc123",
        ":TestTest MODE TestTest :+iw",
        ':xbot PRIVMSG TestTest :\x01DCC SEND "movie file.mkv" 3232235777 5001 104857600\x01',
        ":café PRIVMSG #foo :naïve",
    ]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 64])
def test_fixed_size_chunks_match_single_chunk(size):
    chunks = [STREAM[i : i + size] for i in range(0, len(STREAM), size)]
    assert _feed_all(chunks) == _feed_all([STREAM])


def test_every_two_way_split_matches_single_chunk():
    expected = _feed_all([STREAM])
    for split in range(len(STREAM) + 1):
        assert _feed_all([STREAM[:split], STREAM[split:]]) == expected, split


def test_chunk_ending_on_line_feed_leaves_no_remainder():
    framer = LineFramer()
    assert framer.feed(b"PING :one\r\n") == ["PING :one"]
    assert framer.remainder == b""


def test_partial_line_is_carried_to_next_chunk():
    framer = LineFramer()
    assert framer.feed(b"PING :o") == []
    assert framer.remainder == b"PING :o"
    assert framer.feed(b"ne\r\nPI") == ["PING :one"]
    assert framer.remainder == b"PI"


def test_whitespace_at_chunk_boundary_is_kept_inside_line():
    framer = LineFramer()
    framer.feed(b"PRIVMSG #foo :hello ")
    assert framer.feed(b"world\n") == ["PRIVMSG #foo :hello world"]


def test_lines_are_trimmed_and_blank_lines_dropped():
    framer = LineFramer()
    assert framer.feed(b"  PING :x \r\n\r\n\n \t\r\n") == ["PING :x"]


def test_multibyte_character_split_across_chunks():
    framer = LineFramer()
    assert framer.feed(b"caf\xc3") == []
    assert framer.feed(b"\xa9\n") == ["café"]


def test_invalid_utf8_line_raises_decode_error():
    framer = LineFramer()
    with pytest.raises(DecodeError) as excinfo:
        framer.feed(b"PING :\xff\xfe\r\n")
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_invalid_bytes_in_incomplete_line_are_not_decoded_yet():
    framer = LineFramer()
    assert framer.feed(b"PING :ok\n\xff") == ["PING :ok"]
