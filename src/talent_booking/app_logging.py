"""Logging setup for the booking service."""

import logging

LOGGER_NAME = "talent_booking"

# Keys passed through ``extra=`` by the services.
_CONTEXT_FIELDS = (
    "application_id",
    "booking_id",
    "talent_id",
    "admin_id",
    "from_status",
    "to_status",
    "notification_type",
    "failed",
    "sensitive",
)


class ContextFormatter(logging.Formatter):
    """Formatter that appends known ``extra`` fields as ``key=value`` pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:  # noqa: N802
        message = super().formatMessage(record)
        context = " ".join(
            f"{name}={getattr(record, name)}"
            for name in _CONTEXT_FIELDS
            if hasattr(record, name)
        )
        return f"{message} [{context}]" if context else message


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
