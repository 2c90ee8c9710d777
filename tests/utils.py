"""
Test utilities: a small service interface and its mocks
"""
from abc import abstractmethod
from typing import Protocol

from simplemock.engine.calls import CallIdentifier
from simplemock.test_doubles.base import AsyncMockBase, MockBase


class Save(CallIdentifier):
    id: str
    value: int


class Load(CallIdentifier):
    id: str


class Service(Protocol):
    @abstractmethod
    def save(self, id: str, value: int) -> None: ...

    @abstractmethod
    def load(self, id: str) -> int: ...


class AsyncService(Protocol):
    @abstractmethod
    async def save(self, id: str, value: int) -> None: ...

    @abstractmethod
    async def load(self, id: str) -> int: ...


class ServiceMock(MockBase, Service):
    def save(self, id: str, value: int) -> None:
        return self._resolve(Save(id=id, value=value), type(None))

    def load(self, id: str) -> int:
        return self._resolve(Load(id=id), int)


class AsyncServiceMock(AsyncMockBase, AsyncService):
    async def save(self, id: str, value: int) -> None:
        return await self._resolve(Save(id=id, value=value), type(None))

    async def load(self, id: str) -> int:
        return await self._resolve(Load(id=id), int)


class Counter:
    """Zero-argument resolver that counts its invocations"""

    def __init__(self, value=None):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value
