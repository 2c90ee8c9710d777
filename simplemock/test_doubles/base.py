from __future__ import annotations

from typing import Any, Callable, Hashable, Optional

from simplemock.core.container import get_concurrent_engine, get_engine
from simplemock.engine.concurrent import ConcurrentExpectationEngine
from simplemock.engine.expectations import ExpectationEngine, void_resolver


def returning(value: Any) -> Callable[[], Any]:
    """Resolver that always produces ``value``."""
    return lambda: value


def raising(exc: BaseException) -> Callable[[], Any]:
    """Resolver that raises ``exc`` when the call happens."""

    def _raise() -> Any:
        raise exc

    return _raise


class MockBase:
    """
    Base class for synchronous mocks.

    Subclass it together with the interface being mocked, declare one CallIdentifier per
    method, and forward every method into ``_resolve``::

        class ServiceMock(MockBase, Service):
            def load(self, id: str) -> int:
                return self._resolve(Load(id=id), int)
    """

    def __init__(self, engine: Optional[ExpectationEngine] = None) -> None:
        self._engine = engine or get_engine()

    @property
    def engine(self) -> ExpectationEngine:
        return self._engine

    def expect(
        self,
        call: Hashable,
        after: Optional[Hashable] = None,
        resolver: Callable[[], Any] = void_resolver,
    ) -> MockBase:
        self._engine.expect(call, after=after, resolver=resolver)
        return self

    def verify(self) -> bool:
        return self._engine.verify()

    def reset(self) -> None:
        self._engine.reset()

    def _resolve(self, call: Hashable, result_type: Any = None) -> Any:
        return self._engine.resolve(call, result_type)


class AsyncMockBase:
    """Base class for mocks whose methods are awaited from concurrently running tasks."""

    def __init__(self, engine: Optional[ConcurrentExpectationEngine] = None) -> None:
        self._engine = engine or get_concurrent_engine()

    @property
    def engine(self) -> ConcurrentExpectationEngine:
        return self._engine

    async def expect(
        self,
        call: Hashable,
        after: Optional[Hashable] = None,
        resolver: Callable[[], Any] = void_resolver,
    ) -> AsyncMockBase:
        await self._engine.expect(call, after=after, resolver=resolver)
        return self

    async def verify(self) -> bool:
        return await self._engine.verify()

    async def reset(self) -> None:
        await self._engine.reset()

    async def _resolve(self, call: Hashable, result_type: Any = None) -> Any:
        return await self._engine.resolve(call, result_type)
