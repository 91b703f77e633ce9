"""Bounded-concurrency dispatch of independent store operations."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from linkboard.contracts.operations import BatchReport, OperationKind, StoreOperation
from linkboard.contracts.record import Record
from linkboard.contracts.store import RecordStore
from linkboard.engine.progress import APPLY_PHASE, NullSyncProgress, SyncProgress

_LOG = logging.getLogger(__name__)


class BatchExecutor:
    """Runs a batch of operations with at most *max_concurrent* in flight.

    Every operation is allowed to settle; failures are collected in the
    returned :class:`BatchReport` rather than cancelling siblings. When
    *deadline_seconds* expires, unsettled operations are cancelled and listed
    as pending.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        max_concurrent: int = 4,
        deadline_seconds: float | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._store = store
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._deadline_seconds = deadline_seconds
        self._progress = progress or NullSyncProgress()

    async def run(self, operations: Sequence[StoreOperation]) -> BatchReport:
        report = BatchReport()
        if not operations:
            return report

        self._progress.phase_start(APPLY_PHASE, total=len(operations))
        tasks = {asyncio.create_task(self._settle(op, report)): op for op in operations}
        _, pending = await asyncio.wait(set(tasks), timeout=self._deadline_seconds)

        if pending:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            report.pending = [op for task, op in tasks.items() if task in pending]
            _LOG.warning("Deadline expired with %d operations unsettled", len(report.pending))

        if report.ok:
            self._progress.phase_done(APPLY_PHASE)
        else:
            first_error = report.failed[0][1] if report.failed else TimeoutError("batch deadline expired")
            self._progress.phase_error(APPLY_PHASE, first_error)
        return report

    async def _settle(self, op: StoreOperation, report: BatchReport) -> None:
        try:
            async with self._semaphore:
                record = await self._apply(op)
        except Exception as exc:
            _LOG.warning("%s failed: %s", op.describe(), exc)
            report.failed.append((op, exc))
            self._progress.operation_settled(op, exc)
        else:
            _LOG.debug("%s done", op.describe())
            report.succeeded.append((op, record))
            self._progress.operation_settled(op)

    async def _apply(self, op: StoreOperation) -> Record | None:
        if op.kind == OperationKind.CREATE:
            return await self._store.create(op.target, op.properties)
        if op.kind == OperationKind.UPDATE:
            return await self._store.update(op.target, op.properties)
        await self._store.archive(op.target)
        return None
