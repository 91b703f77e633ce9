"""CLI progress renderers."""

from linkboard.cli.progress.rich import RichSyncProgress

__all__ = ["RichSyncProgress"]
