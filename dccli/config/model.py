from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_NICK, DEFAULT_PORT, DEFAULT_SERVER


class SessionConfig(BaseModel):
    """Read-only settings for a single download run.

    Attributes:
        server: IRC server host name or address.
        port: IRC server port.
        bot: Nick of the XDCC bot to request the pack from.
        pack: XDCC pack number.
        channels: Channels to join before requesting, without leading '#'.
        verbose: Echo protocol traffic and disable the progress display.
        nick: Nick used to register on the server.
    """

    model_config = ConfigDict(frozen=True)

    server: str = Field(default=DEFAULT_SERVER, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    bot: str = Field(min_length=1)
    pack: int = Field(ge=0)
    channels: tuple[str, ...] = ()
    verbose: bool = False
    nick: str = Field(default=DEFAULT_NICK, min_length=1)

    @field_validator("channels", mode="before")
    @classmethod
    def validate_channels(cls, v: Any) -> tuple[str, ...]:
        """Strip whitespace and leading '#', drop blanks.

        Order and repeats are kept; one JOIN goes out per entry.
        """
        if v is None:
            return ()
        if isinstance(v, str) or not isinstance(v, list | tuple):
            raise ValueError("channels must be a list")
        validated = []
        for c in v:
            if isinstance(c, str):
                stripped = c.strip().lstrip("#")
                if stripped:
                    validated.append(stripped)
        return tuple(validated)

    @field_validator("bot", "nick", "server")
    @classmethod
    def validate_token(cls, v: str) -> str:
        v = v.strip()
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("must be a single non-empty word")
        return v
