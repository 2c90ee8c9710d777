"""
Expectation engine shared by every mock.

The engine stores expected call sequences together with the resolver that produces the
value for the last call of each sequence, resolves actual calls against them, and checks
at the end of a test that declared and observed sequences coincide.
"""
import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from simplemock.core.config import MockSettings, get_settings
from simplemock.core.exceptions import (
    CouldNotChainSequence,
    InvalidResultType,
    MissingExpected,
    ResolverMissing,
    UnexpectedMethod,
    VerificationError,
    VerificationFailed,
)
from simplemock.engine.calls import Sequence
from simplemock.engine.result_types import matches_result_type
from simplemock.engine.utils import find_not_contained

logger = logging.getLogger(__name__)

Resolver = Callable[[], Any]


def void_resolver() -> None:
    return None


class ExpectationState:
    """The three collections behind an engine, plus the rules that mutate them."""

    def __init__(self) -> None:
        self.expected: List[Sequence] = []
        self.resolvers: Dict[Sequence, Any] = {}
        self.registered: List[Sequence] = []

    def add(self, call: Hashable, after: Optional[Hashable], resolver: Any) -> Sequence:
        if after is None:
            sequence = (call,)
            self.expected.append(sequence)
        elif self.expected and self.expected[-1][-1] == after:
            # the shorter sequence keeps its binding; lookups always use the longest one
            sequence = self.expected.pop() + (call,)
            self.expected.append(sequence)
        else:
            raise CouldNotChainSequence(call, after)
        self.resolvers[sequence] = resolver
        return sequence

    def chained_candidate(self, call: Hashable) -> Optional[Sequence]:
        """The chain continuing the last registered call, if a resolver waits for it."""
        if not self.registered:
            return None
        candidate = self.registered[-1] + (call,)
        return candidate if candidate in self.resolvers else None

    def register_chained(self, candidate: Sequence) -> None:
        del self.resolvers[candidate]
        self.registered[-1] = candidate

    def register_single(self, call: Hashable) -> Tuple[Sequence, Any]:
        sequence = (call,)
        self.registered.append(sequence)
        try:
            return sequence, self.resolvers[sequence]
        except KeyError:
            raise ResolverMissing(call) from None

    def consume(self, sequence: Sequence) -> None:
        self.resolvers.pop(sequence, None)

    def discrepancies(self, collect_all: bool) -> List[VerificationError]:
        found: List[VerificationError] = []
        for sequence in find_not_contained(self.expected, self.registered):
            found.append(MissingExpected(sequence))
            if not collect_all:
                return found
        for sequence in find_not_contained(self.registered, self.expected):
            found.append(UnexpectedMethod(sequence))
            if not collect_all:
                return found
        return found

    def clear(self) -> None:
        self.expected.clear()
        self.resolvers.clear()
        self.registered.clear()


def check_result(call: Hashable, value: Any, result_type: Any, settings: MockSettings) -> Any:
    if settings.STRICT_RESULT_TYPES and not matches_result_type(value, result_type):
        raise InvalidResultType(call, result_type, value)
    return value


def raise_discrepancies(found: List[VerificationError], collect_all: bool) -> bool:
    if not found:
        logger.debug("Verification passed")
        return True
    for discrepancy in found:
        logger.warning(f"Verification discrepancy: {discrepancy.message}")
    if collect_all:
        raise VerificationFailed(found)
    raise found[0]


class ExpectationEngine:
    """
    Single-threaded engine, one per mock instance.

    ``expect`` declares a call (optionally chained ``after`` the tail of the last declared
    sequence), ``resolve`` is called by the mocked method with the identifier of the call
    happening now, and ``verify`` compares both sides and resets the engine.
    """

    def __init__(self, settings: MockSettings = None) -> None:
        self.settings = settings or get_settings()
        self._state = ExpectationState()

    def expect(
        self,
        call: Hashable,
        after: Optional[Hashable] = None,
        resolver: Resolver = void_resolver,
    ) -> "ExpectationEngine":
        sequence = self._state.add(call, after, resolver)
        logger.debug(f"Expecting {list(sequence)!r}")
        return self

    def resolve(self, call: Hashable, result_type: Any = None) -> Any:
        state = self._state

        candidate = state.chained_candidate(call)
        if candidate is not None:
            value = check_result(call, state.resolvers[candidate](), result_type, self.settings)
            state.register_chained(candidate)
            logger.debug(f"Resolved chained call {list(candidate)!r}")
            return value

        sequence, resolver = state.register_single(call)
        value = check_result(call, resolver(), result_type, self.settings)
        state.consume(sequence)
        logger.debug(f"Resolved call {call!r}")
        return value

    def verify(self) -> bool:
        collect_all = self.settings.COLLECT_ALL_DISCREPANCIES
        try:
            return raise_discrepancies(self._state.discrepancies(collect_all), collect_all)
        finally:
            self._state.clear()

    def reset(self) -> None:
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
