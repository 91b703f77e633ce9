"""Core synchronization engine."""

from __future__ import annotations

import asyncio
import logging

from linkboard.contracts.config import LinkboardConfig
from linkboard.contracts.exceptions import PayloadError, SyncError, SyncTimeoutError
from linkboard.contracts.operations import SyncPlan, SyncResult
from linkboard.contracts.record import Record
from linkboard.contracts.state import DesiredState
from linkboard.contracts.store import RecordStore
from linkboard.engine.executor import BatchExecutor
from linkboard.engine.planner import plan_container, plan_profile
from linkboard.engine.progress import DISCOVER_PHASE, NullSyncProgress, SyncProgress
from linkboard.schema.containers import COLLECTION_SCHEMAS

_LOG = logging.getLogger(__name__)


class SyncEngine:
    def __init__(
        self,
        store: RecordStore,
        config: LinkboardConfig,
        *,
        progress: SyncProgress | None = None,
    ) -> None:
        self._store = store
        self._config = config
        self._progress = progress or NullSyncProgress()
        self._semaphore = asyncio.Semaphore(config.max_concurrent)

    async def sync(self, state: DesiredState, *, dry_run: bool = False) -> SyncResult:
        """Plan and apply *state*.

        A failed operation takes precedence over an expired deadline: when both
        happen the raised error is a plain ``SyncError`` and the unsettled
        operations are still listed in ``error.report.pending``.
        """
        plan = await self.plan(state)
        if dry_run:
            return SyncResult(plan=plan, dry_run=True)

        executor = BatchExecutor(
            self._store,
            max_concurrent=self._config.max_concurrent,
            deadline_seconds=self._config.deadline_seconds,
            progress=self._progress,
        )
        report = await executor.run(plan.operations)

        if report.failed:
            op, error = report.failed[0]
            raise SyncError(f"{op.describe()} failed: {error}", operation=op, report=report) from error
        if report.pending:
            raise SyncTimeoutError(
                f"deadline expired with {len(report.pending)} operations unsettled",
                pending=tuple(report.pending),
                report=report,
            )

        _LOG.info("Sync applied %d operations", len(report.succeeded))
        return SyncResult(plan=plan, report=report)

    async def plan(self, state: DesiredState) -> SyncPlan:
        """Compute every operation for *state*; preconditions fail before any store call."""
        plan = SyncPlan()
        page_id = state.profile_page_id or self._config.profile_page_id
        plan.operations.append(
            plan_profile(
                page_id,
                state,
                limit=self._config.chunk_limit,
                num_parts=self._config.split_parts,
            )
        )

        collections = state.collections()
        missing = sorted(name for name in collections if name not in self._config.containers)
        if missing:
            raise PayloadError(f"no container configured for: {', '.join(missing)}")

        existing = await self._discover(list(collections))
        for name, items in collections.items():
            plan.extend(
                plan_container(
                    COLLECTION_SCHEMAS[name],
                    self._config.containers[name],
                    items,
                    existing[name],
                    limit=self._config.chunk_limit,
                    num_parts=self._config.split_parts,
                )
            )
        return plan

    async def _discover(self, names: list[str]) -> dict[str, list[Record]]:
        existing: dict[str, list[Record]] = {}
        if not names:
            return existing

        self._progress.phase_start(DISCOVER_PHASE, total=len(names))
        try:
            async with asyncio.TaskGroup() as tg:
                for name in names:
                    tg.create_task(self._discover_one(name, existing))
        except* SyncError as sync_error_group:
            first_sync_error = sync_error_group.exceptions[0]
            self._progress.phase_error(DISCOVER_PHASE, first_sync_error)
            raise first_sync_error from first_sync_error.__cause__
        self._progress.phase_done(DISCOVER_PHASE)
        return existing

    async def _discover_one(self, name: str, existing: dict[str, list[Record]]) -> None:
        container_id = self._config.containers[name]
        try:
            async with self._semaphore:
                records = await self._store.query(container_id)
        except Exception as exc:
            raise SyncError(f"query {name} -> {container_id} failed: {exc}") from exc
        existing[name] = records
        self._progress.container_discovered(name, len(records))
