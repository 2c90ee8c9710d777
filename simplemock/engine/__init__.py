from simplemock.engine.calls import CallIdentifier, Sequence, as_sequence
from simplemock.engine.concurrent import ConcurrentExpectationEngine
from simplemock.engine.expectations import ExpectationEngine, void_resolver

__all__ = [
    "CallIdentifier",
    "Sequence",
    "as_sequence",
    "ConcurrentExpectationEngine",
    "ExpectationEngine",
    "void_resolver",
]
