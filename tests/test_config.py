from __future__ import annotations

import pytest
from pydantic import ValidationError

from dccli.config import SessionConfig, parse_args


class TestSessionConfig:
    def test_defaults(self):
        config = SessionConfig(bot="xbot", pack=3)
        assert config.server == "irc.rizon.net"
        assert config.port == 6667
        assert config.channels == ()
        assert config.verbose is False
        assert config.nick == "TestTest"

    def test_channels_normalized_in_order_with_repeats_kept(self):
        config = SessionConfig(
            bot="xbot", pack=3, channels=["#Foo", " bar ", "", "#", "Foo", "baz"]
        )
        assert config.channels == ("Foo", "bar", "Foo", "baz")

    def test_is_frozen(self):
        config = SessionConfig(bot="xbot", pack=3)
        with pytest.raises(ValidationError):
            config.pack = 4  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"bot": ""},
            {"bot": "two words"},
            {"pack": -1},
            {"port": 0},
            {"port": 70000},
            {"channels": "foo"},
            {"nick": " "},
        ],
    )
    def test_rejects_invalid_values(self, overrides):
        values = {"bot": "xbot", "pack": 1, **overrides}
        with pytest.raises(ValidationError):
            SessionConfig(**values)


class TestParseArgs:
    def test_positional_and_defaults(self):
        config = parse_args(["xbot", "42"])
        assert (config.bot, config.pack) == ("xbot", 42)
        assert config.server == "irc.rizon.net"
        assert config.port == 6667
        assert config.verbose is False

    def test_all_options(self):
        config = parse_args(
            [
                "xbot",
                "7",
                "-c",
                "foo",
                "--channel",
                "#bar",
                "-p",
                "6697",
                "-s",
                "irc.example.net",
                "-n",
                "leecher",
                "-v",
            ]
        )
        assert config.channels == ("foo", "bar")
        assert config.port == 6697
        assert config.server == "irc.example.net"
        assert config.nick == "leecher"
        assert config.verbose is True

    def test_validation_error_becomes_usage_error(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["xbot", "1", "-p", "0"])
        assert excinfo.value.code == 2
        assert "port" in capsys.readouterr().err

    def test_missing_pack(self):
        with pytest.raises(SystemExit):
            parse_args(["xbot"])
