"""Public API surface for linkboard."""

from linkboard.auth import create_token_resolver
from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    LinkboardError,
    PayloadError,
    StoreError,
    SyncError,
    SyncTimeoutError,
)
from linkboard.contracts.operations import BatchReport, OperationKind, StoreOperation, SyncPlan, SyncResult
from linkboard.contracts.record import Record
from linkboard.contracts.state import DesiredState, LinkItem, ProfileConfig, SocialItem, TrackItem
from linkboard.contracts.store import RecordStore
from linkboard.engine import SyncEngine, SyncProgress
from linkboard.providers import create_store
from linkboard.sdk import Linkboard, load_config, load_state, parse_state

__all__ = [
    "AuthenticationError",
    "BatchReport",
    "ConfigError",
    "DesiredState",
    "LinkItem",
    "Linkboard",
    "LinkboardConfig",
    "LinkboardError",
    "OperationKind",
    "PayloadError",
    "ProfileConfig",
    "Record",
    "RecordStore",
    "SocialItem",
    "StoreError",
    "StoreOperation",
    "SyncEngine",
    "SyncError",
    "SyncPlan",
    "SyncProgress",
    "SyncResult",
    "SyncTimeoutError",
    "TrackItem",
    "create_store",
    "create_token_resolver",
    "load_config",
    "load_state",
    "parse_state",
]
