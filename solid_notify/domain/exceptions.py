"""
Domain exceptions - Semantic error types for notification delivery.

Adapters translate sink I/O errors into these types. Nothing in the
package catches them; they propagate to the caller unchanged.
"""


class NotificationError(Exception):
    """Base class for notification domain errors."""

    pass


class DeliveryFailure(NotificationError):
    """A notifier could not deliver its message."""

    def __init__(self, channel: str, message: str) -> None:
        super().__init__(f"{channel} delivery failed: {message}")
        self.channel = channel
        self.message = message


class LogWriteFailure(NotificationError):
    """A logger could not record its entry."""

    def __init__(self, info: str) -> None:
        super().__init__(f"log write failed: {info}")
        self.info = info
