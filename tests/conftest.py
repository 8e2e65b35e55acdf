import logging

import pytest

from planar.domain.value_objects.point import Point2D
from planar.shared.config.settings import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def point():
    return lambda x=0.0, y=0.0: Point2D(x, y)


@pytest.fixture
def origin():
    return Point2D(0.0, 0.0)


class FixedSource:
    """Random source returning a predefined sequence."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def next_int(self):
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def fixed_source():
    return FixedSource


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("planar")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
