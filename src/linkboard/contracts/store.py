"""Remote record store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from linkboard.contracts.record import Properties, Record


class RecordStore(ABC):
    @abstractmethod
    async def __aenter__(self) -> RecordStore: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    async def query(self, container_id: str) -> list[Record]:
        """Return every non-archived record of *container_id*, in store order."""

    @abstractmethod
    async def create(self, container_id: str, properties: Properties) -> Record: ...

    @abstractmethod
    async def update(self, record_id: str, properties: Properties) -> Record: ...

    @abstractmethod
    async def archive(self, record_id: str) -> None: ...

    @abstractmethod
    async def get(self, record_id: str) -> Record: ...
