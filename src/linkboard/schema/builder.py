"""Maps payload models onto store properties."""

from __future__ import annotations

from typing import Any

from linkboard.codec.chunking import DEFAULT_PARTS, TEXT_LIMIT, chunk, part_names, split_parts
from linkboard.codec.validation import is_valid_image_url
from linkboard.contracts.exceptions import PayloadError
from linkboard.contracts.record import (
    ChoiceValue,
    NumberValue,
    Properties,
    PropertyValue,
    TextValue,
    TitleValue,
    UrlValue,
)
from linkboard.schema.fields import ORDER_PROPERTY, ContainerSchema, FieldKind, FieldSpec

# Notion rejects rich_text and title arrays longer than this.
MAX_FRAGMENTS = 100


def build_properties(
    schema: ContainerSchema,
    source: Any,
    *,
    position: int | None = None,
    limit: int = TEXT_LIMIT,
    num_parts: int = DEFAULT_PARTS,
) -> Properties:
    """Build the full property set for *source*.

    Every field in the table is written, including empty ones, so an update
    clears values the payload no longer carries.
    """
    properties: Properties = {}
    for field_spec in schema.fields:
        value = _plain_value(field_spec, source)
        if field_spec.split and field_spec.kind == FieldKind.TEXT:
            segments = split_parts(_as_text(value), num_parts)
            for name, segment in zip(part_names(field_spec.prop, num_parts), segments, strict=True):
                properties[name] = TextValue(_fragments(schema, name, segment, limit))
            continue
        properties[field_spec.prop] = _to_property(schema, field_spec, value, limit)

    if schema.ordered and position is not None:
        properties[ORDER_PROPERTY] = NumberValue(position)
    return properties


def _plain_value(field_spec: FieldSpec, source: Any) -> Any:
    value = field_spec.read(source)
    if field_spec.encode is not None:
        value = field_spec.encode(value)
    if (value is None or value == "") and field_spec.default is not None:
        value = field_spec.default
    if field_spec.validates_image(source):
        value = is_valid_image_url(value)
    return value


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _fragments(schema: ContainerSchema, name: str, value: Any, limit: int) -> tuple[str, ...]:
    fragments = chunk(_as_text(value), limit)
    if len(fragments) > MAX_FRAGMENTS:
        raise PayloadError(
            f"{schema.collection}.{name} needs {len(fragments)} text fragments; the store accepts at most {MAX_FRAGMENTS}"
        )
    return tuple(fragments)


def _to_property(schema: ContainerSchema, field_spec: FieldSpec, value: Any, limit: int) -> PropertyValue:
    kind = field_spec.kind
    if kind == FieldKind.TEXT:
        return TextValue(_fragments(schema, field_spec.prop, value, limit))
    if kind == FieldKind.TITLE:
        return TitleValue(_fragments(schema, field_spec.prop, value, limit))
    if kind == FieldKind.URL:
        return UrlValue(value or None)
    if kind == FieldKind.CHOICE:
        return ChoiceValue(value or None)
    return NumberValue(value)
