"""Reconciliation engine."""

from linkboard.engine.engine import SyncEngine
from linkboard.engine.executor import BatchExecutor
from linkboard.engine.matcher import MatchResult, match_records, normalize_key
from linkboard.engine.planner import plan_container, plan_profile
from linkboard.engine.progress import NullSyncProgress, SyncProgress
from linkboard.engine.reader import load_remote_state

__all__ = [
    "BatchExecutor",
    "MatchResult",
    "NullSyncProgress",
    "SyncEngine",
    "SyncProgress",
    "load_remote_state",
    "match_records",
    "normalize_key",
    "plan_container",
    "plan_profile",
]
