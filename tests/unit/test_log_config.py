"""Unit tests for the logging setup."""

import logging

from carrental.config import Settings
from carrental.infrastructure.logging.log_config import _parse_level, setup_logging


def test_category_levels_are_applied():
    settings = Settings(log_level="WARNING", log_level_sql="ERROR", log_level_rentals="DEBUG")

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("carrental.application.services").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    assert _parse_level("chatty") == logging.INFO
    assert _parse_level("debug") == logging.DEBUG
