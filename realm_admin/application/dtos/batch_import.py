"""DTOs for batch user import."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BatchUser:
    """One {email, name} descriptor from an import request. Never stored."""

    email: str
    name: str


@dataclass(frozen=True)
class BatchFailure:
    """Failure recorded for a single descriptor (index is 1-based, as shown to admins)."""

    index: int
    email: str
    error_code: str
    message: str


@dataclass(frozen=True)
class BatchImportResult:
    """Outcome of one import request."""

    new_users: list[BatchUser]
    failures: list[BatchFailure] = field(default_factory=list)
    error_summary: str | None = None

    @property
    def has_errors(self) -> bool:
        return bool(self.failures)

    @property
    def succeeded(self) -> bool:
        """Partial success counts: only zero new users plus errors is a failure."""
        return bool(self.new_users) or not self.failures
