"""Incremental splitting of the control stream into IRC lines."""

from __future__ import annotations

from ..errors import DecodeError

_WHITESPACE = b" \t\r\n\x0b\x0c"


class LineFramer:
    """Turn arbitrary socket chunks into complete, stripped text lines.

    Bytes after the last line feed are kept as the remainder and prepended to
    the next chunk, so the output does not depend on where reads are split.
    """

    def __init__(self) -> None:
        self._remainder = b""

    @property
    def remainder(self) -> bytes:
        return self._remainder

    def feed(self, chunk: bytes) -> list[str]:
        """Consume ``chunk`` and return every line it completes.

        Raises:
            DecodeError: A completed line is not valid UTF-8.
        """
        *complete, self._remainder = (self._remainder + chunk).split(b"\n")
        lines = []
        for raw in complete:
            stripped = raw.strip(_WHITESPACE)
            if not stripped:
                continue
            try:
                lines.append(stripped.decode("utf-8"))
            except UnicodeDecodeError as e:
                raise DecodeError(
                    "received a line that is not valid UTF-8",
                    data={"line": stripped[:80]},
                ) from e
        return lines
