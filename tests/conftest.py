"""pytest configuration shared by the unit and fuzz tests."""

from typing import Any, Generator
from unittest.mock import Mock

import pytest


def pytest_configure(config: Any) -> None:
    config.addinivalue_line('markers', 'fuzz: property based tests run with hypothesis')


@pytest.fixture(autouse=True)
def mock_logger() -> Generator[Mock, None, None]:
    """Replace the logger so decoding can log without a configured environment."""
    from mrtparser.logger.option import option

    # Save original values
    original_logger = option.logger
    original_formater = option.formater

    mock_option_logger = Mock()
    mock_option_logger.debug = Mock()
    mock_option_logger.info = Mock()
    mock_option_logger.warning = Mock()
    mock_option_logger.error = Mock()
    mock_option_logger.critical = Mock()

    option.logger = mock_option_logger
    option.formater = Mock(return_value='formatted message')

    yield mock_option_logger

    option.logger = original_logger
    option.formater = original_formater


@pytest.fixture
def clean_environment() -> Generator[None, None, None]:
    """Forget any configuration loaded by a previous test."""
    from mrtparser.environment import Environment

    Environment.reset()
    yield
    Environment.reset()
