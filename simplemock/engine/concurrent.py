"""
asyncio variant of the expectation engine.

Every operation holds one ``asyncio.Lock`` from start to finish, so expectations declared
and calls resolved from concurrently running tasks are applied one at a time. Resolvers may
be plain callables or coroutine functions; they run while the lock is held and must not call
back into the same engine.
"""
import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Hashable, Optional, Tuple, Union

from simplemock.core.config import MockSettings, get_settings
from simplemock.engine.calls import Sequence
from simplemock.engine.expectations import (
    ExpectationState,
    check_result,
    raise_discrepancies,
    void_resolver,
)

logger = logging.getLogger(__name__)

AsyncResolver = Callable[[], Union[Any, Awaitable[Any]]]


async def _produce(resolver: AsyncResolver) -> Any:
    value = resolver()
    if inspect.isawaitable(value):
        value = await value
    return value


class ConcurrentExpectationEngine:
    def __init__(self, settings: MockSettings = None) -> None:
        self.settings = settings or get_settings()
        self._state = ExpectationState()
        self._lock = asyncio.Lock()

    async def expect(
        self,
        call: Hashable,
        after: Optional[Hashable] = None,
        resolver: AsyncResolver = void_resolver,
    ) -> "ConcurrentExpectationEngine":
        async with self._lock:
            sequence = self._state.add(call, after, resolver)
        logger.debug(f"Expecting {list(sequence)!r}")
        return self

    async def resolve(self, call: Hashable, result_type: Any = None) -> Any:
        async with self._lock:
            state = self._state

            candidate = state.chained_candidate(call)
            if candidate is not None:
                value = await _produce(state.resolvers[candidate])
                check_result(call, value, result_type, self.settings)
                state.register_chained(candidate)
                logger.debug(f"Resolved chained call {list(candidate)!r}")
                return value

            sequence, resolver = state.register_single(call)
            value = await _produce(resolver)
            check_result(call, value, result_type, self.settings)
            state.consume(sequence)
            logger.debug(f"Resolved call {call!r}")
            return value

    async def verify(self) -> bool:
        collect_all = self.settings.COLLECT_ALL_DISCREPANCIES
        async with self._lock:
            try:
                return raise_discrepancies(self._state.discrepancies(collect_all), collect_all)
            finally:
                self._state.clear()

    async def reset(self) -> None:
        async with self._lock:
            self._state.clear()

    @property
    def expected_sequences(self) -> Tuple[Sequence, ...]:
        return tuple(self._state.expected)

    @property
    def registered_sequences(self) -> Tuple[Sequence, ...]:
        return tuple(self._state.registered)

    @property
    def pending(self) -> Tuple[Sequence, ...]:
        return tuple(self._state.resolvers)
