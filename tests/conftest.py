import pytest
from loguru import logger

from geocoords.city import City


@pytest.fixture
def wroclaw() -> City:
    """Creates a city with coordinates."""
    return City(name="Wrocław", latitude=51.1, longitude=17.03)


@pytest.fixture
def caplog(caplog):
    """Enable logging for the package"""
    logger.remove()
    logger.enable("geocoords")
    handler_id = logger.add(caplog.handler)
    yield caplog
    logger.remove(handler_id)
