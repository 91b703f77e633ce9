"""Pure planning of store operations for one payload."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel

from linkboard.codec.chunking import DEFAULT_PARTS, TEXT_LIMIT
from linkboard.contracts.exceptions import PayloadError
from linkboard.contracts.operations import PROFILE_CONTAINER, OperationKind, StoreOperation
from linkboard.contracts.record import Record
from linkboard.contracts.state import ProfileConfig
from linkboard.engine.matcher import match_records, normalize_key
from linkboard.schema.builder import build_properties
from linkboard.schema.containers import PROFILE
from linkboard.schema.extractor import get_key
from linkboard.schema.fields import ContainerSchema

_LOG = logging.getLogger(__name__)


def plan_container(
    schema: ContainerSchema,
    container_id: str,
    items: Sequence[BaseModel],
    records: Sequence[Record],
    *,
    limit: int = TEXT_LIMIT,
    num_parts: int = DEFAULT_PARTS,
) -> list[StoreOperation]:
    """Compute the create/update/archive operations converging one container."""
    key_field = schema.key_field
    if key_field is None:
        raise PayloadError(f"{schema.collection} has no identity field and cannot be reconciled")

    match = match_records(
        items,
        records,
        item_key=key_field.read,
        record_key=lambda record: get_key(record.properties, key_field),
    )

    operations: list[StoreOperation] = []
    for position, item in enumerate(items):
        properties = build_properties(schema, item, position=position, limit=limit, num_parts=num_parts)
        item_key = normalize_key(key_field.read(item))
        record = match.record_for(position)
        if record is not None:
            operations.append(
                StoreOperation(
                    kind=OperationKind.UPDATE,
                    collection=schema.collection,
                    target=record.id,
                    properties=properties,
                    item_key=item_key,
                    position=position,
                )
            )
        else:
            operations.append(
                StoreOperation(
                    kind=OperationKind.CREATE,
                    collection=schema.collection,
                    target=container_id,
                    properties=properties,
                    item_key=item_key,
                    position=position,
                )
            )

    for record in match.unmatched_records:
        operations.append(
            StoreOperation(
                kind=OperationKind.ARCHIVE,
                collection=schema.collection,
                target=record.id,
                item_key=normalize_key(get_key(record.properties, key_field)),
            )
        )

    _LOG.debug(
        "Planned %s: %d matched, %d new, %d to archive",
        schema.collection,
        len(match.matched),
        len(match.new),
        len(match.unmatched_records),
    )
    return operations


def plan_profile(
    page_id: str | None,
    profile: ProfileConfig,
    *,
    limit: int = TEXT_LIMIT,
    num_parts: int = DEFAULT_PARTS,
) -> StoreOperation:
    """Single update of the profile singleton record."""
    if not page_id or not page_id.strip():
        raise PayloadError("profile page id is required")
    return StoreOperation(
        kind=OperationKind.UPDATE,
        collection=PROFILE_CONTAINER,
        target=page_id.strip(),
        properties=build_properties(PROFILE, profile, limit=limit, num_parts=num_parts),
    )
