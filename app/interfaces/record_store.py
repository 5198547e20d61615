from abc import ABC, abstractmethod
from typing import Any


class RecordStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> dict[str, Any] | None:
        ...

    @abstractmethod
    async def put(self, key: str, value: dict[str, Any]) -> None:
        ...
