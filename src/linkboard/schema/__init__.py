"""Container property schemas, builder and extractor."""

from linkboard.schema.builder import build_properties
from linkboard.schema.containers import COLLECTION_SCHEMAS, LINKS, PROFILE, SOCIALS, TRACKS
from linkboard.schema.extractor import (
    extract_fields,
    extract_item,
    get_choice,
    get_field,
    get_key,
    get_number,
    get_order,
    get_text,
    get_title,
    get_url,
)
from linkboard.schema.fields import ORDER_PROPERTY, ContainerSchema, FieldKind, FieldSpec

__all__ = [
    "COLLECTION_SCHEMAS",
    "LINKS",
    "ORDER_PROPERTY",
    "PROFILE",
    "SOCIALS",
    "TRACKS",
    "ContainerSchema",
    "FieldKind",
    "FieldSpec",
    "build_properties",
    "extract_fields",
    "extract_item",
    "get_choice",
    "get_field",
    "get_key",
    "get_number",
    "get_order",
    "get_text",
    "get_title",
    "get_url",
]
