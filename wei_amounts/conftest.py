import copy
import sys

import pytest
from loguru import logger

from wei_amounts.core import config as amounts_config


def pytest_configure(config):
    config.addinivalue_line("markers", "cli: exercises the click command line")


@pytest.fixture
def restore_global_config():
    original = copy.deepcopy(amounts_config.CONFIG)
    yield
    amounts_config.set_config(original)


@pytest.fixture(autouse=True)
def _reset_logger():
    # The CLI swaps loguru sinks; put the default stderr sink back afterwards.
    yield
    logger.remove()
    logger.add(sys.stderr)
