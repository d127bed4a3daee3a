"""Project logging package.

Contains internal logging utilities (event catalog + EventLogger). Avoid
importing stdlib logging through this package name externally.
"""

from .event_catalog import EventCatalog, catalog, reload_event_catalog  # noqa: F401
from .logger import EventLogger, logger  # noqa: F401

__all__ = ["EventCatalog", "EventLogger", "catalog", "logger", "reload_event_catalog"]
