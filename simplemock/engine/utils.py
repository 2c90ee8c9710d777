from typing import Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def find_not_contained(items: Iterable[T], container: List[T]) -> Iterator[T]:
    """Yield the elements of ``items`` that do not appear in ``container``, in order."""
    for item in items:
        if item not in container:
            yield item
