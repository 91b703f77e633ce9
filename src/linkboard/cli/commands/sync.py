"""Sync command formatting."""

from __future__ import annotations

import argparse

from linkboard import Linkboard, OperationKind, SyncResult, load_config, load_state
from linkboard.cli.progress.rich import RichSyncProgress


def _format_counts(counts: dict[OperationKind, int]) -> str:
    return ", ".join(f"{counts[kind]} {kind}" for kind in OperationKind if counts[kind])


def format_sync_summary(result: SyncResult) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    counts = result.plan.counts()

    lines = ["", f"linkboard - sync complete ({mode})", ""]
    for collection in sorted(counts):
        lines.append(f"  {collection + ':':<10} {_format_counts(counts[collection]) or 'none'}")
    if not counts:
        lines.append("  Status:    nothing to do")

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> SyncResult:
    config = load_config(args.config)
    state = load_state(args.state)

    if not args.verbose:
        with RichSyncProgress() as progress:
            result = await Linkboard(config=config, progress=progress).sync(state, dry_run=args.dry_run)
    else:
        result = await Linkboard(config=config).sync(state, dry_run=args.dry_run)

    print(format_sync_summary(result))
    return result


__all__ = ["format_sync_summary", "run_sync"]
