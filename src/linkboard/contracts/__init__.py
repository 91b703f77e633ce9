"""Public contracts for linkboard."""

from linkboard.contracts.config import KNOWN_COLLECTIONS, LinkboardConfig
from linkboard.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    LinkboardError,
    PayloadError,
    StoreError,
    SyncError,
    SyncTimeoutError,
)
from linkboard.contracts.operations import (
    PROFILE_CONTAINER,
    BatchReport,
    OperationKind,
    StoreOperation,
    SyncPlan,
    SyncResult,
)
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
from linkboard.contracts.state import (
    Appearance,
    Background,
    ButtonStyle,
    DesiredState,
    LinkItem,
    Profile,
    ProfileConfig,
    Seo,
    SocialItem,
    TrackItem,
)
from linkboard.contracts.store import RecordStore

__all__ = [
    "KNOWN_COLLECTIONS",
    "PROFILE_CONTAINER",
    "Appearance",
    "AuthenticationError",
    "Background",
    "BatchReport",
    "ButtonStyle",
    "ChoiceValue",
    "ConfigError",
    "DesiredState",
    "LinkItem",
    "LinkboardConfig",
    "LinkboardError",
    "NumberValue",
    "OperationKind",
    "PayloadError",
    "Profile",
    "ProfileConfig",
    "Properties",
    "PropertyValue",
    "Record",
    "RecordStore",
    "Seo",
    "SocialItem",
    "StoreError",
    "StoreOperation",
    "SyncError",
    "SyncPlan",
    "SyncResult",
    "SyncTimeoutError",
    "TextValue",
    "TitleValue",
    "TrackItem",
    "UrlValue",
]
