from simplemock.core.exceptions.base import (
    SimpleMockBaseException,
    ConfigurationError,
    ExpectationError,
    ResolutionError,
    VerificationError,
    CouldNotChainSequence,
    ResolverMissing,
    InvalidResultType,
    MissingExpected,
    UnexpectedMethod,
    VerificationFailed,
)

__all__ = [
    "SimpleMockBaseException",
    "ConfigurationError",
    "ExpectationError",
    "ResolutionError",
    "VerificationError",
    "CouldNotChainSequence",
    "ResolverMissing",
    "InvalidResultType",
    "MissingExpected",
    "UnexpectedMethod",
    "VerificationFailed",
]
