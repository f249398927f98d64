import enum


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR KINDS: closed set, matched by kind rather than by class
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorKind(str, enum.Enum):
    NOT_FOUND        = "NOT_FOUND"
    CONFLICT         = "CONFLICT"
    INVALID_DURATION = "INVALID_DURATION"
    OVERLAP          = "OVERLAP"
    PAST_SCHEDULE    = "PAST_SCHEDULE"


class ErrorCode:
    """Codes emitted by the HTTP layer that are not domain kinds."""
    VALIDATION_ERROR      = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(Exception):
    """
    Base exception for every rejection raised by the booking core.
    Carries a machine-readable ``kind`` and a human-readable message.
    """
    def __init__(self, kind: ErrorKind, message: str, field: str | None = None):
        super().__init__(message)
        self.kind    = kind
        self.message = message
        self.field   = field

    def __repr__(self):
        return f"<{type(self).__name__} kind={self.kind.value} message={self.message!r}>"


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

class NotFoundException(AppException):
    def __init__(self, resource: str = "Resource", detail: str | None = None):
        message = f"{resource} not found" + (f" with {detail}" if detail else "")
        super().__init__(ErrorKind.NOT_FOUND, message)


class RoomAlreadyExistsException(AppException):
    def __init__(self, name: str):
        super().__init__(ErrorKind.CONFLICT, f"Room with name {name} already exists.", field="name")


class RoomDeletionException(AppException):
    def __init__(self):
        super().__init__(ErrorKind.CONFLICT, "Cannot delete room with active bookings.")


class BookingCancellationException(AppException):
    def __init__(self):
        super().__init__(ErrorKind.CONFLICT, "Cannot cancel past bookings.")


class InvalidDurationException(AppException):
    def __init__(self):
        super().__init__(
            ErrorKind.INVALID_DURATION,
            "Booking must be at least 1 hour or a multiple of 1 hour.",
            field="endTime",
        )


class BookingOverlapException(AppException):
    def __init__(self):
        super().__init__(ErrorKind.OVERLAP, "Booking time overlaps with another booking.")


class PastScheduleException(AppException):
    def __init__(self, message: str = "The booking date cannot be in the past.", field: str = "date"):
        super().__init__(ErrorKind.PAST_SCHEDULE, message, field=field)
