"""
Domain layer - Pure notification logic with zero third-party imports.

Defines the formatter, the Notifier and Logger ports, the domain
exceptions and the NotificationService that wires them together.
"""

from .exceptions import DeliveryFailure, LogWriteFailure, NotificationError
from .formatter import MessageFormatter
from .notification import NotificationService, notify_user
from .ports import Logger, Notifier

__all__ = [
    "DeliveryFailure",
    "LogWriteFailure",
    "Logger",
    "MessageFormatter",
    "NotificationError",
    "NotificationService",
    "Notifier",
    "notify_user",
]
