"""Remote record and typed property value contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class TextValue:
    chunks: tuple[str, ...] = ()


@dataclass(frozen=True)
class TitleValue:
    chunks: tuple[str, ...] = ()


@dataclass(frozen=True)
class UrlValue:
    url: str | None = None


@dataclass(frozen=True)
class ChoiceValue:
    name: str | None = None


@dataclass(frozen=True)
class NumberValue:
    value: int | float | None = None


PropertyValue = Union[TextValue, TitleValue, UrlValue, ChoiceValue, NumberValue]
Properties = dict[str, PropertyValue]


@dataclass
class Record:
    """One persisted store entry."""

    id: str
    properties: Properties = field(default_factory=dict)
    archived: bool = False
