import logging
from functools import lru_cache
from typing import Any

from pydantic import ConfigDict, PydanticSchemaGenerationError, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

_ARBITRARY_TYPES = ConfigDict(arbitrary_types_allowed=True)


def _build_adapter(result_type: Any) -> TypeAdapter:
    try:
        return TypeAdapter(result_type)
    except PydanticSchemaGenerationError:
        # plain classes, at any depth, are then checked with isinstance
        logger.debug(f"No pydantic schema for {result_type!r}, allowing arbitrary types")
        return TypeAdapter(result_type, config=_ARBITRARY_TYPES)


@lru_cache(maxsize=256)
def _cached_adapter(result_type: Any) -> TypeAdapter:
    return _build_adapter(result_type)


def matches_result_type(value: Any, result_type: Any) -> bool:
    """
    True when ``value`` can be returned from a method declared to return ``result_type``.

    Strict pydantic validation is used so that ``True`` is not an ``int`` and ``"1"`` is
    not an ``int``; the value itself is never coerced. ``None`` means "anything".
    """
    if result_type is None or result_type is Any:
        return True
    try:
        adapter = _cached_adapter(result_type)
    except TypeError:
        # unhashable annotation
        adapter = _build_adapter(result_type)
    try:
        adapter.validate_python(value, strict=True)
    except ValidationError:
        return False
    return True
