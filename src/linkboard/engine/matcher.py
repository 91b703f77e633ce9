"""Identity matching between desired items and existing records."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from linkboard.contracts.record import Record

T = TypeVar("T")


def normalize_key(value: Any) -> str | None:
    """Canonical string form of an identity value; ``None`` when blank.

    ``1``, ``1.0`` and ``"1"`` all normalize to ``"1"``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    key = str(value).strip()
    return key or None


@dataclass
class MatchResult(Generic[T]):
    """Partial bijection between item positions and records."""

    matched: dict[int, Record] = field(default_factory=dict)
    new: list[int] = field(default_factory=list)
    unmatched_records: list[Record] = field(default_factory=list)

    def record_for(self, position: int) -> Record | None:
        return self.matched.get(position)


def match_records(
    items: Sequence[T],
    records: Sequence[Record],
    *,
    item_key: Callable[[T], Any],
    record_key: Callable[[Record], Any],
) -> MatchResult[T]:
    """Pair each item with at most one record sharing its identity key.

    Among records sharing a key the first in store order wins; later
    duplicates stay unmatched. Among items sharing a key the first claims the
    record and the rest are new.
    """
    by_key: dict[str, Record] = {}
    for record in records:
        key = normalize_key(record_key(record))
        if key is not None and key not in by_key:
            by_key[key] = record

    result: MatchResult[T] = MatchResult()
    claimed: set[str] = set()
    for position, item in enumerate(items):
        key = normalize_key(item_key(item))
        record = by_key.get(key) if key is not None else None
        if record is None or record.id in claimed:
            result.new.append(position)
            continue
        claimed.add(record.id)
        result.matched[position] = record

    result.unmatched_records = [record for record in records if record.id not in claimed]
    return result
