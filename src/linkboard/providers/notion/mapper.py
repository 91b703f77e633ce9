"""Conversion between typed property values and Notion property JSON."""

from __future__ import annotations

import logging
from typing import Any

from linkboard.contracts.record import (
    ChoiceValue,
    NumberValue,
    Properties,
    PropertyValue,
    Record,
    TextValue,
    TitleValue,
    UrlValue,
)

_LOG = logging.getLogger(__name__)


def _rich_text_payload(chunks: tuple[str, ...]) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": content}} for content in chunks]


def to_notion_property(value: PropertyValue) -> dict[str, Any]:
    if isinstance(value, TextValue):
        return {"rich_text": _rich_text_payload(value.chunks)}
    if isinstance(value, TitleValue):
        return {"title": _rich_text_payload(value.chunks)}
    if isinstance(value, UrlValue):
        return {"url": value.url or None}
    if isinstance(value, ChoiceValue):
        return {"select": {"name": value.name} if value.name else None}
    if isinstance(value, NumberValue):
        return {"number": value.value}
    raise TypeError(f"unsupported property value: {value!r}")


def to_notion_properties(properties: Properties) -> dict[str, dict[str, Any]]:
    return {name: to_notion_property(value) for name, value in properties.items()}


def _fragments(items: Any) -> tuple[str, ...]:
    if not isinstance(items, list):
        return ()
    fragments: list[str] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        content = item.get("plain_text")
        if not isinstance(content, str):
            text = item.get("text")
            content = text.get("content") if isinstance(text, dict) else None
        if isinstance(content, str):
            fragments.append(content)
    return tuple(fragments)


def from_notion_property(payload: dict[str, Any]) -> PropertyValue | None:
    """Typed value of one Notion property, or ``None`` for unsupported/malformed ones."""
    prop_type = payload.get("type")
    if prop_type is None:
        prop_type = next((key for key in ("rich_text", "title", "url", "select", "number") if key in payload), None)

    if prop_type == "rich_text":
        return TextValue(_fragments(payload.get("rich_text")))
    if prop_type == "title":
        return TitleValue(_fragments(payload.get("title")))
    if prop_type == "url":
        url = payload.get("url")
        return UrlValue(url if isinstance(url, str) else None)
    if prop_type == "select":
        select = payload.get("select")
        name = select.get("name") if isinstance(select, dict) else None
        return ChoiceValue(name if isinstance(name, str) else None)
    if prop_type == "number":
        number = payload.get("number")
        if isinstance(number, bool) or not isinstance(number, (int, float)):
            return NumberValue(None)
        return NumberValue(number)
    return None


def record_from_page(page: dict[str, Any]) -> Record:
    record_id = page.get("id")
    if not isinstance(record_id, str) or not record_id:
        raise ValueError("Notion page payload has no id")

    properties: Properties = {}
    raw_properties = page.get("properties")
    if isinstance(raw_properties, dict):
        for name, payload in raw_properties.items():
            if not isinstance(payload, dict):
                continue
            value = from_notion_property(payload)
            if value is None:
                _LOG.debug("Skipping unsupported property %r on page %s", name, record_id)
                continue
            properties[name] = value

    return Record(
        id=record_id,
        properties=properties,
        archived=bool(page.get("archived") or page.get("in_trash")),
    )
