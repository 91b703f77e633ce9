"""Progress events emitted while a payload is discovered and applied.

``Discover`` runs one query per collection; ``Apply`` settles one store
operation per step. Observers get the collection and operation involved so
they can keep per-collection tallies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from linkboard.contracts.operations import StoreOperation

DISCOVER_PHASE = "Discover"
APPLY_PHASE = "Apply"


class SyncProgress(ABC):
    @abstractmethod
    def phase_start(self, phase: str, total: int | None = None) -> None: ...

    @abstractmethod
    def container_discovered(self, collection: str, records: int) -> None:
        """The existing records of *collection* were read."""

    @abstractmethod
    def operation_settled(self, operation: StoreOperation, error: BaseException | None = None) -> None:
        """*operation* finished; *error* is set when the store rejected it."""

    @abstractmethod
    def phase_done(self, phase: str) -> None: ...

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None: ...


class NullSyncProgress(SyncProgress):
    def phase_start(self, phase: str, total: int | None = None) -> None:
        pass

    def container_discovered(self, collection: str, records: int) -> None:
        pass

    def operation_settled(self, operation: StoreOperation, error: BaseException | None = None) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
