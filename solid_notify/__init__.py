"""
solid-notify - SOLID principles shown through one notification flow.

Public API re-exports the domain service, its ports and the console
adapters.
"""

from solid_notify.adapters.logger import ConsoleLogger
from solid_notify.adapters.notifier import EmailNotifier, SMSNotifier
from solid_notify.domain import (
    DeliveryFailure,
    Logger,
    LogWriteFailure,
    MessageFormatter,
    NotificationError,
    NotificationService,
    Notifier,
    notify_user,
)

__version__ = "0.1.0"

__all__ = [
    "ConsoleLogger",
    "DeliveryFailure",
    "EmailNotifier",
    "LogWriteFailure",
    "Logger",
    "MessageFormatter",
    "NotificationError",
    "NotificationService",
    "Notifier",
    "SMSNotifier",
    "notify_user",
]
