import logging

import pytest
from pydantic import ValidationError

from mandelbrot_explorer.config import MAX_ITERATIONS, ExplorerConfig
from mandelbrot_explorer.logging_config import LOGGER_NAME, setup_logging
from mandelbrot_explorer.cli import build_parser, load_config


def test_defaults():
    config = ExplorerConfig()
    assert (config.width, config.height) == (640, 360)
    assert config.iterations == 100
    assert config.zoom_factor == 0.8
    assert config.pan_fraction == 0.1
    assert (config.step, config.fast_step) == (1, 10)
    assert config.workers is None


@pytest.mark.parametrize(
    "field,value",
    [
        ("width", 0),
        ("iterations", 0),
        ("iterations", MAX_ITERATIONS + 1),
        ("zoom_factor", 1.0),
        ("zoom_factor", 0.0),
        ("pan_fraction", 0.0),
        ("workers", 0),
    ],
)
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        ExplorerConfig(**{field: value})


def test_from_file(tmp_path):
    path = tmp_path / "explorer.json"
    path.write_text('{"width": 320, "iterations": 250}', encoding="utf-8")

    config = ExplorerConfig.from_file(path)
    assert config.width == 320
    assert config.iterations == 250
    assert config.height == 360


def test_cli_overrides_file(tmp_path):
    path = tmp_path / "explorer.json"
    path.write_text('{"width": 320, "iterations": 250}', encoding="utf-8")

    args = build_parser().parse_args(["--config", str(path), "--iterations", "42", "--workers", "3"])
    config = load_config(args)
    assert (config.width, config.iterations, config.workers) == (320, 42, 3)


def test_cli_rejects_invalid_override():
    args = build_parser().parse_args(["--width", "-5"])
    with pytest.raises(ValidationError):
        load_config(args)


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "explorer.log"
    setup_logging(logging.DEBUG, str(log_file))
    setup_logging(logging.DEBUG, str(log_file))

    logger = logging.getLogger(LOGGER_NAME)
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger(f"{LOGGER_NAME}.services").debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
