"""Error taxonomy surfaced at the service boundary."""


class BookingError(Exception):
    """Base error carrying a user-facing message and HTTP status."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    status_code = 400


class Unauthorized(BookingError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class Forbidden(BookingError):
    status_code = 403

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class NotFound(BookingError):
    status_code = 404


class ApplicationNotFound(NotFound):
    def __init__(self, message: str = "Application not found") -> None:
        super().__init__(message)


class BookingNotFound(NotFound):
    def __init__(self, message: str = "Booking not found") -> None:
        super().__init__(message)


class Conflict(BookingError):
    status_code = 409


class InternalError(BookingError):
    def __init__(self, message: str = "Unexpected error") -> None:
        super().__init__(message)
