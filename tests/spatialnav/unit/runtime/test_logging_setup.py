from __future__ import annotations

import json
import logging

from spatialnav.api.logging import LoggingConfig
from spatialnav.runtime.config import VirtualizationConfig
from spatialnav.runtime.logging import (
    JsonFormatter,
    configure_logging,
    setup_logging,
    shutdown_logging,
)


def test_setup_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("SPATIALNAV_LOG_LEVEL", "DEBUG")
        setup_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_file_logging_streams_json_through_queue(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_path = tmp_path / "logs" / "spatialnav.jsonl"
    try:
        configure_logging(LoggingConfig(level_name="INFO", file_path=str(log_path)))
        logging.getLogger("spatialnav.runtime").info("list_frame focus=%d", 7)
        shutdown_logging()
        record = json.loads(log_path.read_text(encoding="utf-8").splitlines()[-1])
        assert record["msg"] == "list_frame focus=7"
        assert record["logger"] == "spatialnav.runtime"
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_keeps_extra_fields() -> None:
    record = logging.LogRecord(
        name="spatialnav.virtualization",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="offset_table_built items=%d",
        args=(3,),
        exc_info=None,
    )
    record.behavior = "center"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "offset_table_built items=3"
    assert payload["level"] == "DEBUG"
    assert payload["fields"] == {"behavior": "center"}


def test_setup_logging_uses_config_level(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        monkeypatch.setenv("SPATIALNAV_LOG_LEVEL", "DEBUG")
        setup_logging(VirtualizationConfig(log_level="ERROR"))
        assert root.level == logging.ERROR
        assert logging.getLogger("spatialnav").level == logging.ERROR
    finally:
        logging.getLogger("spatialnav").setLevel(logging.NOTSET)
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
