"""Store operation and sync result contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from linkboard.contracts.record import Properties, Record

PROFILE_CONTAINER = "profile"


class OperationKind(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class StoreOperation:
    """A single create/update/archive call against the record store.

    ``target`` is the container (database) id for creates and the record id
    for updates and archives.
    """

    kind: OperationKind
    collection: str
    target: str
    properties: Properties = field(default_factory=dict)
    item_key: str | None = None
    position: int | None = None

    def describe(self) -> str:
        subject = f"{self.collection}[{self.item_key}]" if self.item_key else self.collection
        return f"{self.kind} {subject} -> {self.target}"


@dataclass
class SyncPlan:
    """Operations computed for one desired-state payload."""

    operations: list[StoreOperation] = field(default_factory=list)

    def extend(self, operations: list[StoreOperation]) -> None:
        self.operations.extend(operations)

    def of_kind(self, kind: OperationKind) -> list[StoreOperation]:
        return [op for op in self.operations if op.kind == kind]

    def for_collection(self, collection: str) -> list[StoreOperation]:
        return [op for op in self.operations if op.collection == collection]

    def counts(self) -> dict[str, dict[OperationKind, int]]:
        totals: dict[str, dict[OperationKind, int]] = {}
        for op in self.operations:
            per_kind = totals.setdefault(op.collection, {kind: 0 for kind in OperationKind})
            per_kind[op.kind] += 1
        return totals


@dataclass
class BatchReport:
    """Settlement outcome of one executed batch."""

    succeeded: list[tuple[StoreOperation, Record | None]] = field(default_factory=list)
    failed: list[tuple[StoreOperation, BaseException]] = field(default_factory=list)
    pending: list[StoreOperation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.pending


@dataclass
class SyncResult:
    plan: SyncPlan
    report: BatchReport | None = None
    dry_run: bool = False
