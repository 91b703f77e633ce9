"""Record store factory."""

from __future__ import annotations

from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.store import RecordStore
from linkboard.providers.notion import NotionStore


def create_store(config: LinkboardConfig, *, token: str) -> RecordStore:
    return NotionStore(
        token=token,
        api_base=config.api_base,
        notion_version=config.notion_version,
        max_retries=config.max_retries,
    )
