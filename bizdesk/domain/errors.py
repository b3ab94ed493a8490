"""Error taxonomy for record writes and store access.

Pure filter and aggregation functions never raise these; they are produced by
write-time validation, by the order state machine and by Record Store
adapters.
"""


class BusinessDeskError(Exception):
    """Base class for all expected business desk failures."""


class ValidationError(BusinessDeskError):
    """A write violates a field constraint.

    Attributes:
        field: Name of the offending field, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidStatusTransitionError(ValidationError):
    """An order status change is not allowed by the lifecycle."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            f"Cannot move order from '{current}' to '{target}'",
            field="status",
        )
        self.current = current
        self.target = target


class NotFoundError(BusinessDeskError):
    """Update or delete referenced a record id that does not exist."""

    def __init__(self, record_type: str, record_id: str) -> None:
        super().__init__(f"{record_type} not found: {record_id}")
        self.record_type = record_type
        self.record_id = record_id


class StoreError(BusinessDeskError):
    """The persistence backend is unavailable or rejected the operation."""


__all__ = [
    "BusinessDeskError",
    "ValidationError",
    "InvalidStatusTransitionError",
    "NotFoundError",
    "StoreError",
]
