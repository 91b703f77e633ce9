"""Total accessors reading plain values out of store records.

Accessors never raise: a missing property, or one of an unexpected type,
reads as the documented default for its kind.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from linkboard.codec.chunking import DEFAULT_PARTS, join, part_names
from linkboard.contracts.record import (
    ChoiceValue,
    NumberValue,
    Properties,
    Record,
    TextValue,
    TitleValue,
    UrlValue,
)
from linkboard.schema.fields import ORDER_PROPERTY, ContainerSchema, FieldKind, FieldSpec

_LOG = logging.getLogger(__name__)


def get_text(properties: Properties, name: str) -> str:
    prop = properties.get(name)
    if isinstance(prop, (TextValue, TitleValue)):
        return join(prop.chunks)
    return ""


def get_title(properties: Properties, name: str) -> str:
    prop = properties.get(name)
    if isinstance(prop, TitleValue):
        return join(prop.chunks)
    return get_text(properties, name)


def get_url(properties: Properties, name: str) -> str:
    prop = properties.get(name)
    if isinstance(prop, UrlValue) and prop.url:
        return prop.url
    return ""


def get_choice(properties: Properties, name: str) -> str | None:
    prop = properties.get(name)
    if isinstance(prop, ChoiceValue) and prop.name:
        return prop.name
    return None


def get_number(properties: Properties, name: str) -> int | float:
    prop = properties.get(name)
    if not isinstance(prop, NumberValue) or prop.value is None:
        return 0
    value = prop.value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


_ACCESSORS = {
    FieldKind.TEXT: get_text,
    FieldKind.TITLE: get_title,
    FieldKind.URL: get_url,
    FieldKind.CHOICE: get_choice,
    FieldKind.NUMBER: get_number,
}


def get_field(properties: Properties, field_spec: FieldSpec, *, num_parts: int = DEFAULT_PARTS) -> Any:
    """Plain value of one field; split text fields are re-joined from their companion properties."""
    if field_spec.split and field_spec.kind == FieldKind.TEXT:
        value: Any = join(get_text(properties, name) for name in part_names(field_spec.prop, num_parts))
    else:
        value = _ACCESSORS[field_spec.kind](properties, field_spec.prop)
    if field_spec.decode is not None:
        value = field_spec.decode(value)
    if (value is None or value == "") and field_spec.fallback is not None:
        value = field_spec.fallback
    return value


def get_key(properties: Properties, field_spec: FieldSpec) -> Any:
    """Identity value of a record, or ``None`` when the key property is absent or empty.

    Unlike the total accessors this applies no defaults, so a record without a
    key never collides with a real item key such as ``0``.
    """
    prop = properties.get(field_spec.prop)
    if isinstance(prop, NumberValue):
        return prop.value
    if isinstance(prop, (TextValue, TitleValue)):
        return join(prop.chunks) or None
    if isinstance(prop, UrlValue):
        return prop.url
    if isinstance(prop, ChoiceValue):
        return prop.name
    return None


def get_order(record: Record) -> int | float:
    return get_number(record.properties, ORDER_PROPERTY)


def extract_fields(schema: ContainerSchema, record: Record, *, num_parts: int = DEFAULT_PARTS) -> dict[str, Any]:
    """Nested plain mapping of every field in *schema*, keyed by attribute name."""
    extracted: dict[str, Any] = {}
    for field_spec in schema.fields:
        *parents, leaf = field_spec.path.split(".")
        target = extracted
        for parent in parents:
            target = target.setdefault(parent, {})
        target[leaf] = get_field(record.properties, field_spec, num_parts=num_parts)
    return extracted


def extract_item(schema: ContainerSchema, record: Record, *, num_parts: int = DEFAULT_PARTS) -> BaseModel | None:
    """Model read through *schema*, or ``None`` when the stored values do not fit it."""
    try:
        return schema.model.model_validate(extract_fields(schema, record, num_parts=num_parts))
    except ValidationError as exc:
        _LOG.warning(
            "Skipping %s record %s: %d invalid field(s): %s",
            schema.collection,
            record.id,
            exc.error_count(),
            ", ".join(".".join(str(loc) for loc in error["loc"]) for error in exc.errors()),
        )
        return None
