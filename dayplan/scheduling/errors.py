"""Scheduling Error Types.

Scheduling outcomes (no room, shrunk block, truncated reflow) are normal
return values and never raise. These types are reserved for schedules that
break a structural invariant.

Standard detail codes:
- OUTSIDE_WINDOW: A block starts before or ends after the day window
- OVERLAP: Two blocks share time
"""


class SchedulingInvariantError(RuntimeError):
    """Raised when a schedule violates a structural invariant.

    Attributes:
        code: Error code (e.g., "INVALID_SCHEDULE")
        details: List of detail codes (e.g., "OVERLAP", "OUTSIDE_WINDOW")
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
