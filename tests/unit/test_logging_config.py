"""
Unit tests for configure_logging.
"""
import logging

import pytest

from user_service.core.logging_config import configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _service_handlers(root):
    return [h for h in root.handlers if h.get_name() == "user_service.console"]


class TestConfigureLogging:

    def test_keeps_existing_handlers(self, root_logger):
        other = logging.NullHandler()
        root_logger.addHandler(other)

        configure_logging("INFO")

        assert other in root_logger.handlers
        assert len(_service_handlers(root_logger)) == 1

    def test_repeated_calls_add_one_handler(self, root_logger):
        configure_logging("INFO")
        configure_logging("DEBUG")

        handlers = _service_handlers(root_logger)
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG
        assert root_logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, root_logger):
        configure_logging("chatty")
        assert root_logger.level == logging.INFO
