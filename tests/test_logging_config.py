import importlib
import logging

from logging_config import LOGGER_NAMES, setup_logging
from spring import Spring
from utils import Timing


def test_setup_logging_attaches_handlers(tmp_path):
    log_file = tmp_path / "frames.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

    Spring(Timing.fps(60), 6.0, 2.0)
    for name in LOGGER_NAMES:
        for handler in logging.getLogger(name).handlers:
            handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "over-damped spring" in text

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def test_logger_names_match_module_loggers():
    for name in LOGGER_NAMES:
        module = importlib.import_module(name)
        assert module.logger is logging.getLogger(name)
