"""Chunked text codec for the store's per-fragment length limit."""

from __future__ import annotations

import math
from collections.abc import Iterable

TEXT_LIMIT = 2000
DEFAULT_PARTS = 3
_COMPANION_SUFFIX = "_comp"


def chunk(value: str | None, limit: int = TEXT_LIMIT) -> list[str]:
    """Split *value* into consecutive slices of at most *limit* characters.

    ``None`` and ``""`` yield ``[]``, which the store reads as a cleared field.
    """
    if not value:
        return []
    limit = max(1, limit)
    return [value[start : start + limit] for start in range(0, len(value), limit)]


def join(chunks: Iterable[str]) -> str:
    return "".join(chunks)


def split_parts(value: str | None, num_parts: int = DEFAULT_PARTS) -> list[str]:
    """Partition *value* into *num_parts* segments for companion properties.

    Segment ``i`` starts at ``ceil(len / num_parts) * i``; the last segment
    takes the remainder. An absent value still yields *num_parts* empty
    segments so every companion property gets overwritten.
    """
    num_parts = max(1, num_parts)
    if not value:
        return [""] * num_parts

    width = math.ceil(len(value) / num_parts)
    segments: list[str] = []
    for index in range(num_parts):
        start = width * index
        end = len(value) if index == num_parts - 1 else width * (index + 1)
        segments.append(value[start:end])
    return segments


def part_names(base: str, num_parts: int = DEFAULT_PARTS) -> list[str]:
    """``base, base_comp1, base_comp2, ...``"""
    return [base] + [f"{base}{_COMPANION_SUFFIX}{index}" for index in range(1, max(1, num_parts))]
