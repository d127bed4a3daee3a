from __future__ import annotations

import io
import json
import logging

import pytest

from dccli.logging_config import LoggerConfigurator
from dccli.logs import EventCatalog, event_catalog
from dccli.logs.logger import EventLogger


@pytest.fixture
def event_logger() -> EventLogger:
    return EventLogger("dccli.test")


def test_template_is_formatted(event_logger, caplog):
    caplog.set_level(logging.INFO, logger="dccli.test")
    event_logger.log_event("dcc", "complete", filename="a.bin", size=3)
    assert caplog.records[-1].getMessage() == '[dcc ] Downloaded "a.bin" (3 bytes)'


def test_debug_mode_appends_fields(event_logger, caplog):
    caplog.set_level(logging.DEBUG, logger="dccli.test")
    event_logger.log_event("dcc", "complete", filename="a.bin", size=3)
    message = caplog.records[-1].getMessage()
    assert "dcc_complete" in message
    assert "(filename=a.bin, size=3)" in message


def test_unknown_event_gets_derived_text(event_logger, caplog):
    caplog.set_level(logging.INFO, logger="dccli.test")
    event_logger.log_event("app", "some_new_thing")
    assert caplog.records[-1].getMessage() == "[app ] app: some new thing"


def test_missing_template_field_falls_back_to_raw_template(event_logger, caplog):
    caplog.set_level(logging.INFO, logger="dccli.test")
    event_logger.log_event("dcc", "complete")
    assert "{filename}" in caplog.records[-1].getMessage()


def test_disabled_level_is_skipped(event_logger, caplog):
    caplog.set_level(logging.INFO, logger="dccli.test")
    event_logger.log_event("irc", "recv", level=logging.DEBUG, line="PING :x")
    assert caplog.records == []


def test_every_catalog_entry_is_a_string():
    raw = json.loads(event_catalog.TEMPLATES_PATH.read_text())
    for actions in raw.values():
        assert all(isinstance(v, str) for v in actions.values())
    assert ("irc", "send") in event_catalog.catalog


def test_missing_catalog_file(tmp_path):
    try:
        event_catalog.reload_event_catalog(tmp_path / "nope.json")
        assert event_catalog.catalog.templates == {
            ("app", "load_error"): "Event templates missing: nope.json"
        }
    finally:
        event_catalog.reload_event_catalog()


def test_unreadable_catalog_file(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    catalog = EventCatalog.load(broken)
    assert list(catalog.templates) == [("app", "load_error")]
    assert catalog.templates[("app", "load_error")].startswith("Event templates unreadable")


def test_catalog_skips_non_string_entries(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"dcc": {"complete": "done {size}", "bad": 3}, "x": []}))
    catalog = EventCatalog.load(path)
    assert catalog.templates == {("dcc", "complete"): "done {size}"}
    assert catalog.render("dcc", "complete", {"size": 7}) == "done 7"
    assert catalog.render("dcc", "complete", {}) == "done {size}"
    assert catalog.render("dcc", "brand_new", {}) == "dcc: brand new"


def test_configurator_levels(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    assert LoggerConfigurator(verbose=False).level == logging.INFO
    assert LoggerConfigurator(verbose=True).level == logging.DEBUG
    monkeypatch.setenv("DEBUG", "yes")
    assert LoggerConfigurator(verbose=False).level == logging.DEBUG


def test_configurator_installs_single_handler(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    stream = io.StringIO()
    LoggerConfigurator(stream=stream).configure()
    LoggerConfigurator(stream=stream).configure()

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, "_dccli_console", False)]
    assert len(ours) == 1

    logging.getLogger("dccli").info("hello")
    assert "hello" in stream.getvalue()
