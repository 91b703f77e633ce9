"""Declarative property descriptors shared by the builder and the extractor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from operator import attrgetter
from typing import Any

from pydantic import BaseModel

ORDER_PROPERTY = "Order"


class FieldKind(StrEnum):
    TEXT = "rich_text"
    TITLE = "title"
    URL = "url"
    CHOICE = "select"
    NUMBER = "number"


@dataclass(frozen=True)
class FieldSpec:
    """Maps one attribute path of a payload model onto one store property.

    ``split`` fields are partitioned across companion properties
    (``prop``, ``prop_comp1``, ...). ``image`` is either a flag or a predicate
    over the source model deciding whether image validation applies.
    """

    path: str
    prop: str
    kind: FieldKind
    default: Any = None
    fallback: Any = None
    split: bool = False
    image: bool | Callable[[Any], bool] = False
    encode: Callable[[Any], Any] | None = None
    decode: Callable[[Any], Any] | None = None

    def read(self, source: Any) -> Any:
        return attrgetter(self.path)(source)

    def validates_image(self, source: Any) -> bool:
        if callable(self.image):
            return bool(self.image(source))
        return self.image


@dataclass(frozen=True)
class ContainerSchema:
    """Field table of one container; ``key_path`` names the identity attribute."""

    collection: str
    model: type[BaseModel]
    fields: tuple[FieldSpec, ...]
    key_path: str | None = None
    ordered: bool = True
    _by_path: dict[str, FieldSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_path", {field_spec.path: field_spec for field_spec in self.fields})

    def field_for(self, path: str) -> FieldSpec:
        return self._by_path[path]

    @property
    def key_field(self) -> FieldSpec | None:
        if self.key_path is None:
            return None
        return self._by_path[self.key_path]
