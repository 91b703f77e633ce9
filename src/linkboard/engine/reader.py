"""Read path: rebuilds a desired-state snapshot from the remote records."""

from __future__ import annotations

import asyncio
import logging

from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.exceptions import StoreError, SyncError
from linkboard.contracts.state import DesiredState, ProfileConfig
from linkboard.contracts.store import RecordStore
from linkboard.schema.containers import COLLECTION_SCHEMAS, PROFILE
from linkboard.schema.extractor import extract_item, get_order

_LOG = logging.getLogger(__name__)


async def load_remote_state(
    store: RecordStore,
    config: LinkboardConfig,
    *,
    profile_page_id: str | None = None,
) -> DesiredState:
    """Read every configured collection (sorted by ``Order``) and the profile record."""
    page_id = profile_page_id or config.profile_page_id
    names = sorted(config.containers)

    async def read_collection(name: str) -> list:
        schema = COLLECTION_SCHEMAS[name]
        try:
            records = await store.query(config.containers[name])
        except StoreError as exc:
            raise SyncError(f"query {name} failed: {exc}") from exc
        items = []
        for record in sorted(records, key=get_order):
            item = extract_item(schema, record, num_parts=config.split_parts)
            if item is not None:
                items.append(item)
        return items

    async def read_profile() -> ProfileConfig:
        if not page_id:
            _LOG.debug("No profile page id configured; using profile defaults")
            return ProfileConfig()
        try:
            record = await store.get(page_id)
        except StoreError as exc:
            raise SyncError(f"read profile {page_id} failed: {exc}") from exc
        profile = extract_item(PROFILE, record, num_parts=config.split_parts)
        if not isinstance(profile, ProfileConfig):
            return ProfileConfig()
        return profile

    profile, *collections = await asyncio.gather(read_profile(), *(read_collection(name) for name in names))
    return DesiredState(
        profile_page_id=page_id,
        profile=profile.profile,
        appearance=profile.appearance,
        seo=profile.seo,
        section_order=profile.section_order,
        **dict(zip(names, collections, strict=True)),
    )
