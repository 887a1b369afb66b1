"""
Demo entry point - Composition root for the notification example.

Configures diagnostic logging, builds concrete adapters and injects them
into NotificationService for two fixed scenarios. Errors from the sinks
are not caught; they terminate the process with the default traceback.
"""

import logging
import sys

from solid_notify.adapters.logger.console import ConsoleLogger
from solid_notify.adapters.notifier.console import EmailNotifier, SMSNotifier
from solid_notify.config.settings import Settings, get_settings
from solid_notify.domain.notification import NotificationService

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send diagnostic records to stderr so stdout carries only demo output."""
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        stream=sys.stderr,
    )


def main() -> int:
    """Run both demo scenarios and return the process exit status."""
    configure_logging(get_settings())
    logger.info("Starting notification demo...")

    service = NotificationService(notifier=EmailNotifier(), logger=ConsoleLogger())
    service.send_notification("John", "Your order has been shipped!")

    # Switching channel needs no change to NotificationService
    service2 = NotificationService(notifier=SMSNotifier(), logger=ConsoleLogger())
    service2.send_notification("Alice", "Your appointment is confirmed!")

    logger.info("Notification demo complete")
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
