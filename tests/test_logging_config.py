import logging

import pytest

from hexgeo import generate
from hexgeo.logging_config import setup_logging


def _stream_handlers(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


@pytest.fixture
def hexgeo_logger():
    logger = logging.getLogger("hexgeo")
    level = logger.level
    propagate = logger.propagate
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def test_package_ships_null_handler(hexgeo_logger):
    assert any(isinstance(h, logging.NullHandler) for h in hexgeo_logger.handlers)
    assert hexgeo_logger.propagate is True


def test_setup_logging_installs_handlers(hexgeo_logger, tmp_path):
    log_file = tmp_path / "hexgeo.log"
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    assert logger is hexgeo_logger
    assert logger.level == logging.DEBUG
    assert len(_stream_handlers(logger)) == 2

    generate(size=-3)
    for handler in logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "hexgeo.validation - ERROR - hexgeo: generate: size must be a positive number" in text


def test_setup_logging_is_idempotent(hexgeo_logger):
    setup_logging()
    setup_logging()
    assert len(_stream_handlers(hexgeo_logger)) == 1
    assert any(isinstance(h, logging.NullHandler) for h in hexgeo_logger.handlers)


def test_setup_logging_stops_propagation_by_default(hexgeo_logger, caplog):
    setup_logging()
    assert hexgeo_logger.propagate is False
    generate(size=-3)
    assert "size must be a positive number" not in caplog.text


def test_setup_logging_can_propagate(hexgeo_logger, caplog):
    setup_logging(propagate=True)
    generate(size=-3)
    assert "size must be a positive number" in caplog.text


def test_debug_line_on_success(hexgeo_logger, caplog):
    with caplog.at_level(logging.DEBUG, logger="hexgeo"):
        generate(10, 2)
    assert "19 vertices and 24 triangles" in caplog.text
