"""
SimpleMock: expectation-based test doubles.
"""
from simplemock.core.config import MockSettings, configure_logging, get_settings
from simplemock.core.container import MockContainer, mock_container
from simplemock.core.exceptions import (
    CouldNotChainSequence,
    InvalidResultType,
    MissingExpected,
    ResolverMissing,
    SimpleMockBaseException,
    UnexpectedMethod,
    VerificationError,
    VerificationFailed,
)
from simplemock.engine import (
    CallIdentifier,
    ConcurrentExpectationEngine,
    ExpectationEngine,
)
from simplemock.test_doubles import AsyncMockBase, MockBase, raising, returning

__version__ = "0.1.0"

__all__ = [
    "MockSettings",
    "configure_logging",
    "get_settings",
    "MockContainer",
    "mock_container",
    "CouldNotChainSequence",
    "InvalidResultType",
    "MissingExpected",
    "ResolverMissing",
    "SimpleMockBaseException",
    "UnexpectedMethod",
    "VerificationError",
    "VerificationFailed",
    "CallIdentifier",
    "ConcurrentExpectationEngine",
    "ExpectationEngine",
    "AsyncMockBase",
    "MockBase",
    "raising",
    "returning",
]
