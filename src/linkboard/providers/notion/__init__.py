"""Notion record store adapter."""

from linkboard.providers.notion.store import NotionStore

__all__ = ["NotionStore"]
