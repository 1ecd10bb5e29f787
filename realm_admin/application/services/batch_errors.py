"""Accumulator for per-descriptor failures in a batch import."""

from __future__ import annotations

from realm_admin.application.dtos.batch_import import BatchFailure
from realm_admin.domain.exceptions import RealmAdminException


class BatchErrors:
    """Collects failures without short-circuiting; summarizes them for the response."""

    def __init__(self) -> None:
        self._failures: list[BatchFailure] = []

    def add(self, index: int, email: str, cause: Exception) -> BatchFailure:
        """Record the failure of descriptor number index (1-based)."""
        if isinstance(cause, RealmAdminException):
            error_code, message = cause.error_code, cause.message
        else:
            error_code, message = type(cause).__name__, str(cause) or repr(cause)
        failure = BatchFailure(
            index=index, email=email, error_code=error_code, message=message
        )
        self._failures.append(failure)
        return failure

    @property
    def failures(self) -> list[BatchFailure]:
        return list(self._failures)

    def is_empty(self) -> bool:
        return not self._failures

    def __len__(self) -> int:
        return len(self._failures)

    def __bool__(self) -> bool:
        return bool(self._failures)

    def summarize(self) -> str | None:
        """Return one message listing every failure, or None when there are none."""
        if not self._failures:
            return None
        count = len(self._failures)
        header = "1 error occurred:" if count == 1 else f"{count} errors occurred:"
        lines = [
            f"\t* user #{f.index} ({f.email}): {f.message}" for f in self._failures
        ]
        return "\n".join([header, *lines])
