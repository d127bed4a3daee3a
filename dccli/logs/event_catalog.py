"""Human-readable text for ``(domain, action)`` events.

Templates live in ``event_templates.json`` next to this module, grouped by
domain (``app``, ``irc``, ``dcc``). A catalog that cannot be read leaves a
single ``app/load_error`` entry so logging keeps working without it.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")


class EventCatalog:
    def __init__(self, templates: Mapping[tuple[str, str], str] | None = None) -> None:
        self.templates: dict[tuple[str, str], str] = dict(templates or {})

    @classmethod
    def load(cls, path: Path = TEMPLATES_PATH) -> EventCatalog:
        try:
            raw: Any = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls({("app", "load_error"): f"Event templates missing: {path.name}"})
        except (OSError, ValueError) as e:
            return cls({("app", "load_error"): f"Event templates unreadable: {e}"[:200]})
        templates: dict[tuple[str, str], str] = {}
        if isinstance(raw, Mapping):
            for domain, actions in raw.items():
                if not isinstance(actions, Mapping):
                    continue
                for action, template in actions.items():
                    if isinstance(template, str):
                        templates[(str(domain), str(action))] = template
        return cls(templates)

    def __contains__(self, key: tuple[str, str]) -> bool:
        return key in self.templates

    def render(self, domain: str, action: str, fields: Mapping[str, object]) -> str:
        """Fill the template for the event.

        A missing field leaves the template text unformatted; an event without
        a template reads ``"<domain>: <action words>"``.
        """
        template = self.templates.get((domain, action))
        if not template:
            return f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
        try:
            return template.format(**fields)
        except (KeyError, IndexError, ValueError):
            return template


catalog = EventCatalog.load()


def reload_event_catalog(path: Path = TEMPLATES_PATH) -> EventCatalog:
    """Replace the shared catalog in place and return it."""
    catalog.templates = EventCatalog.load(path).templates
    return catalog


__all__ = ["EventCatalog", "TEMPLATES_PATH", "catalog", "reload_event_catalog"]
