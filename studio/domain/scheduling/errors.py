"""Scheduling domain errors"""


class SchedulingError(Exception):
    """Base class for scheduling failures"""

    pass


class InvalidInput(SchedulingError):
    """Raised when a time range is malformed, inverted or zero-length"""

    pass


class NotFound(SchedulingError):
    """Raised when an artist (or appointment) reference cannot be resolved"""

    pass


class StoreIntegrityError(SchedulingError):
    """Raised when a stored appointment or block cannot be read as a valid time range"""

    pass


class SchedulingConflict(SchedulingError):
    """Raised when a write would double-book an artist"""

    def __init__(self, result):
        self.result = result
        super().__init__(
            f"Time range conflicts with {len(result.conflicting_appointments)} appointment(s) "
            f"and {len(result.conflicting_blocks)} availability block(s)"
        )
