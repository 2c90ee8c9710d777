from simplemock.test_doubles.base import AsyncMockBase, MockBase, raising, returning

__all__ = ["AsyncMockBase", "MockBase", "raising", "returning"]
