import json
import logging

from host_selector.utils.logging import JSONFormatter, configure_logging, get_logger


def test_json_formatter_includes_context_fields():
    record = logging.LogRecord("host_selector.test", logging.INFO, __file__, 1, "best host selected", None, None)
    record.label = "https://a.example"
    record.latency_ms = 12.5

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "best host selected"
    assert payload["level"] == "INFO"
    assert payload["label"] == "https://a.example"
    assert payload["latency_ms"] == 12.5
    assert payload["timestamp"].endswith("Z")


def test_get_logger_stamps_component(caplog):
    log = get_logger("host_selector.test.component", component="selector")
    with caplog.at_level("INFO"):
        log.info("hello")
    assert caplog.records[-1].component == "selector"


def test_configure_logging_installs_json_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging(run_id="run-1", component="cli", level=logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
