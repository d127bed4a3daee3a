"""Event logger used by every dccli component."""

from __future__ import annotations

import logging

from .event_catalog import catalog


class EventLogger:
    """Emit ``<domain>_<action>`` events with catalog-driven human text.

    Handlers are not attached here; output goes through the root logger set up
    by :class:`dccli.logging_config.LoggerConfigurator`.
    """

    def __init__(self, name: str = "dccli") -> None:
        # Fixed width for event name column when in debug (alignment)
        self._event_name_width = 24
        self.logger = logging.getLogger(name)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        event_name = f"{domain}_{action}".lower()
        human_text = human
        if human_text is None:
            human_text = catalog.render(domain, action, kwargs)
        self._log(level, event_name, domain, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        domain: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        prefix = self._build_prefix(domain)
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kwargs)
            if self.logger.isEnabledFor(logging.DEBUG)
            else f"{prefix} {human_text}"
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _build_prefix(domain: str) -> str:
        return f"[{domain.ljust(4)[:4]}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str,
        kwargs: dict[str, object],
    ) -> str:
        # Line echo events already carry the whole line in the human text
        if event_name in ("irc_send", "irc_recv"):
            return f"{prefix} {human_text}"
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = f"{prefix} {ev} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = EventLogger()
