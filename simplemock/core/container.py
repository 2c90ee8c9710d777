from dependency_injector import containers, providers

from simplemock.core.config import get_settings
from simplemock.engine.concurrent import ConcurrentExpectationEngine
from simplemock.engine.expectations import ExpectationEngine


class MockContainer(containers.DeclarativeContainer):
    """Dependency injection container"""

    # get_settings keeps its own cache; cache_clear() reaches new engines
    settings = providers.Callable(get_settings)

    # Factories: every mock gets its own engine
    engine = providers.Factory(ExpectationEngine, settings=settings)
    concurrent_engine = providers.Factory(ConcurrentExpectationEngine, settings=settings)


mock_container = MockContainer()


def get_engine() -> ExpectationEngine:
    # resolves on every call, so test overrides still work
    return mock_container.engine()


def get_concurrent_engine() -> ConcurrentExpectationEngine:
    return mock_container.concurrent_engine()
