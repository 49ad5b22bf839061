"""JSONFormatter - structured log lines with domain extra fields."""

import json
import logging

import pytest

from city_recipes.infrastructure.observability import JSONFormatter, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "city_recipes.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_core_fields():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "INFO"
    assert line["logger"] == "city_recipes.test"
    assert line["message"] == "hello world"
    assert "timestamp" in line


def test_surfaces_known_extra_fields_only():
    line = json.loads(JSONFormatter().format(
        _record(city_id="paris", recipe_id=3, upstream=None, unrelated="x"),
    ))
    assert line["city_id"] == "paris"
    assert line["recipe_id"] == 3
    assert "upstream" not in line
    assert "unrelated" not in line


def _installed(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if h.get_name() == "city_recipes"]


def test_setup_logging_twice_keeps_a_single_handler(root_logger):
    setup_logging("INFO", "json")
    setup_logging("DEBUG", "text")
    installed = _installed(root_logger)
    assert len(installed) == 1
    assert not isinstance(installed[0].formatter, JSONFormatter)
    assert root_logger.level == logging.DEBUG


def test_setup_logging_leaves_foreign_handlers_alone(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)
    setup_logging("INFO", "json")
    setup_logging("INFO", "json")
    assert foreign in root_logger.handlers
    assert isinstance(_installed(root_logger)[0].formatter, JSONFormatter)
