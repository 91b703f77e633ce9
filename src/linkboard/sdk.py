"""SDK composition root for linkboard."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from linkboard.auth import create_token_resolver
from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.exceptions import ConfigError, PayloadError
from linkboard.contracts.operations import SyncResult
from linkboard.contracts.state import DesiredState
from linkboard.contracts.store import RecordStore
from linkboard.engine import SyncEngine, SyncProgress, load_remote_state
from linkboard.providers import create_store


def load_config(path: str | Path) -> LinkboardConfig:
    """Load and validate config from JSON."""
    config_path = Path(path).expanduser().resolve()
    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return LinkboardConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def parse_state(payload: Mapping[str, Any] | None) -> DesiredState:
    """Validate a desired-state payload (camelCase or snake_case keys)."""
    if payload is None:
        raise PayloadError("desired-state payload is missing")
    if not isinstance(payload, Mapping):
        raise PayloadError("desired-state payload must be an object")
    try:
        return DesiredState.model_validate(dict(payload))
    except ValidationError as exc:
        raise PayloadError(f"invalid desired-state payload: {exc}") from exc


def load_state(path: str | Path) -> DesiredState:
    state_path = Path(path).expanduser().resolve()
    try:
        raw_payload: Any = json.loads(state_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PayloadError(f"failed reading desired-state file: {state_path}") from exc
    except json.JSONDecodeError as exc:
        raise PayloadError(f"invalid JSON in desired-state file: {state_path}") from exc
    return parse_state(raw_payload)


class Linkboard:
    """linkboard SDK public API."""

    def __init__(
        self,
        *,
        config: LinkboardConfig,
        store: RecordStore | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._progress = progress

    async def sync(self, state: DesiredState, *, dry_run: bool = False) -> SyncResult:
        store = await self._resolve_store()
        async with store:
            return await SyncEngine(store, self._config, progress=self._progress).sync(state, dry_run=dry_run)

    async def fetch(self, *, profile_page_id: str | None = None) -> DesiredState:
        store = await self._resolve_store()
        async with store:
            return await load_remote_state(store, self._config, profile_page_id=profile_page_id)

    async def _resolve_store(self) -> RecordStore:
        if self._store is not None:
            return self._store
        token = await create_token_resolver(self._config).resolve()
        return create_store(self._config, token=token)
