"""
Custom exception classes for the SimpleMock engine.
"""
from typing import Any, Hashable, Sequence, Tuple


class SimpleMockBaseException(Exception):
    """Base exception for all SimpleMock exceptions"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def _payload(self) -> Tuple[Any, ...]:
        return (self.message,)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self), self._payload()))


class ConfigurationError(SimpleMockBaseException):
    """Configuration error"""
    pass


class ExpectationError(SimpleMockBaseException):
    """Expectation could not be declared"""
    pass


class ResolutionError(SimpleMockBaseException):
    """A mocked call could not be resolved"""
    pass


class VerificationError(SimpleMockBaseException):
    """Declared and observed calls differ"""
    pass


class CouldNotChainSequence(ExpectationError):
    """The `after` call is not the tail of the last declared sequence"""

    def __init__(self, call: Hashable, after: Hashable):
        super().__init__(f"Could not chain {call!r} after {after!r}: not the tail of the last expected sequence")
        self.call = call
        self.after = after

    def _payload(self):
        return (self.call, self.after)


class ResolverMissing(ResolutionError):
    """No resolver is bound for the call"""

    def __init__(self, call: Hashable):
        super().__init__(f"No resolver available for {call!r}")
        self.call = call

    def _payload(self):
        return (self.call,)


class InvalidResultType(ResolutionError):
    """The resolver produced a value of the wrong shape"""

    def __init__(self, call: Hashable, expected: Any, actual: Any):
        super().__init__(
            f"Resolver for {call!r} returned {type(actual).__name__}, expected {expected!r}"
        )
        self.call = call
        self.expected = expected
        self.actual = actual

    def _payload(self):
        return (self.call, self.expected)


class MissingExpected(VerificationError):
    """An expected sequence was never observed"""

    def __init__(self, sequence: Tuple[Hashable, ...]):
        super().__init__(f"Expected sequence was not called: {list(sequence)!r}")
        self.sequence = tuple(sequence)

    def _payload(self):
        return (self.sequence,)


class UnexpectedMethod(VerificationError):
    """An observed sequence was never expected"""

    def __init__(self, sequence: Tuple[Hashable, ...]):
        super().__init__(f"Unexpected call sequence: {list(sequence)!r}")
        self.sequence = tuple(sequence)

    def _payload(self):
        return (self.sequence,)


class VerificationFailed(VerificationError):
    """Every discrepancy found by one verification"""

    def __init__(self, discrepancies: Sequence[VerificationError]):
        self.discrepancies = list(discrepancies)
        details = "; ".join(d.message for d in self.discrepancies)
        super().__init__(f"{len(self.discrepancies)} verification discrepancies: {details}")

    @property
    def missing(self):
        return [d for d in self.discrepancies if isinstance(d, MissingExpected)]

    @property
    def unexpected(self):
        return [d for d in self.discrepancies if isinstance(d, UnexpectedMethod)]

    def _payload(self):
        return tuple(self.discrepancies)
