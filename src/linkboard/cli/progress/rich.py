"""Rich live display of discovery and apply progress."""

from __future__ import annotations

from collections import Counter
from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from rich.progress import TaskID as RichTaskID

from linkboard.contracts.operations import OperationKind, StoreOperation
from linkboard.engine.progress import APPLY_PHASE, DISCOVER_PHASE, SyncProgress


class RichSyncProgress(SyncProgress):
    """One bar per phase with a running per-collection tally.

    Discover shows how many records each collection holds; Apply shows the
    settled creates, updates and archives per collection plus failures::

        with RichSyncProgress() as progress:
            await Linkboard(config=config, progress=progress).sync(state)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>9}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TextColumn("[dim]{task.fields[tally]}"),
            console=console or Console(stderr=True),
        )
        self._tasks: dict[str, RichTaskID] = {}
        self._discovered: dict[str, int] = {}
        self._applied: dict[str, Counter[OperationKind]] = {}
        self._failed = 0

    def __enter__(self) -> RichSyncProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._tasks[phase] = self._progress.add_task(phase, total=total, tally="")

    def container_discovered(self, collection: str, records: int) -> None:
        self._discovered[collection] = records
        self._advance(DISCOVER_PHASE, self.discover_tally())

    def operation_settled(self, operation: StoreOperation, error: BaseException | None = None) -> None:
        if error is not None:
            self._failed += 1
        else:
            self._applied.setdefault(operation.collection, Counter())[operation.kind] += 1
        self._advance(APPLY_PHASE, self.apply_tally())

    def phase_done(self, phase: str) -> None:
        task_id = self._tasks.get(phase)
        if task_id is None:
            return
        task = self._progress.tasks[task_id]
        total = task.total if task.total is not None else max(task.completed, 1)
        self._progress.update(task_id, total=total, completed=total)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.update(task_id, description=f"[red]{phase}[/red]")

    def discover_tally(self) -> str:
        return ", ".join(f"{name} {count}" for name, count in sorted(self._discovered.items()))

    def apply_tally(self) -> str:
        parts = []
        for collection in sorted(self._applied):
            counts = self._applied[collection]
            kinds = " ".join(f"+{counts[kind]} {kind}" for kind in OperationKind if counts[kind])
            parts.append(f"{collection} {kinds}")
        if self._failed:
            parts.append(f"[red]{self._failed} failed[/red]")
        return "; ".join(parts)

    def _advance(self, phase: str, tally: str) -> None:
        task_id = self._tasks.get(phase)
        if task_id is not None:
            self._progress.update(task_id, advance=1, tally=tally)
