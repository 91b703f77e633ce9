"""Exception hierarchy for linkboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkboard.contracts.operations import BatchReport, StoreOperation


class LinkboardError(Exception):
    """Base exception for all linkboard errors."""


class ConfigError(LinkboardError):
    """Configuration loading or validation failure."""


class PayloadError(LinkboardError):
    """Desired-state payload is missing or violates the caller contract."""


class StoreError(LinkboardError):
    """Remote record store call failure."""

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class AuthenticationError(StoreError):
    """Authentication/authorization failure."""


class SyncError(LinkboardError):
    """Engine-level synchronization failure."""

    def __init__(
        self,
        message: str,
        *,
        operation: StoreOperation | None = None,
        report: BatchReport | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.report = report


class SyncTimeoutError(SyncError):
    """Batch deadline expired before every operation settled."""

    def __init__(
        self,
        message: str,
        *,
        pending: tuple[StoreOperation, ...] = (),
        report: BatchReport | None = None,
    ) -> None:
        super().__init__(message, report=report)
        self.pending = pending
