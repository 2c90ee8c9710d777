import os

import pytest
import pytest_asyncio

from simplemock.core.config import MockSettings, get_settings
from simplemock.engine.concurrent import ConcurrentExpectationEngine
from simplemock.engine.expectations import ExpectationEngine
from utils import AsyncServiceMock, ServiceMock

# Environment setup for testing
for _key in [k for k in os.environ if k.startswith("SIMPLEMOCK_")]:
    del os.environ[_key]


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings, independent of the environment"""
    return MockSettings()


@pytest.fixture
def collecting_settings():
    return MockSettings(COLLECT_ALL_DISCREPANCIES=True)


@pytest.fixture
def engine(settings):
    return ExpectationEngine(settings=settings)


@pytest_asyncio.fixture
async def concurrent_engine(settings):
    return ConcurrentExpectationEngine(settings=settings)


@pytest.fixture
def service_mock(engine):
    return ServiceMock(engine=engine)


@pytest_asyncio.fixture
async def async_service_mock(concurrent_engine):
    return AsyncServiceMock(engine=concurrent_engine)


@pytest.fixture
def service_id():
    return "Test ID"
