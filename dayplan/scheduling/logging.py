"""Scheduling invariant observability.

Call this before re-raising SchedulingInvariantError.
"""

from loguru import logger

from dayplan.scheduling.errors import SchedulingInvariantError


def log_scheduling_invariant_failure(err: SchedulingInvariantError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log a scheduling invariant failure with context.

    Args:
        err: The SchedulingInvariantError that occurred
        context: Additional context dictionary for logging
    """
    logger.bind(code=err.code, details=err.details, **context).error("SCHEDULING_INVARIANT_FAILED")
