"""
Notification domain service - Dependency-inverted orchestration.

NotificationService depends only on the Notifier and Logger ports.
Concrete adapters are chosen by the caller and injected at construction;
the service never builds its own collaborators.

Flow per call:
    format -> send -> log

A failure in send or log propagates unchanged. When send fails, log is
not reached.
"""

import logging
from dataclasses import dataclass, field

from .formatter import MessageFormatter
from .ports import Logger, Notifier

logger = logging.getLogger(__name__)


def notify_user(notifier: Notifier, message: str) -> None:
    """Send a message through any notifier; every variant is interchangeable."""
    notifier.send(message)


@dataclass
class NotificationService:
    """
    Domain service for sending notifications.

    Holds exactly one injected notifier and one injected logger, plus an
    internal formatter that needs no injection.
    """

    notifier: Notifier
    logger: Logger
    formatter: MessageFormatter = field(default_factory=MessageFormatter, init=False, repr=False)

    def send_notification(self, recipient: str, content: str) -> None:
        """
        Format a message, deliver it, then record the delivery.

        Args:
            recipient: Recipient name
            content: Message body
        """
        message = self.formatter.format_message(recipient, content)
        logger.debug("Dispatching notification to %s via %s", recipient, type(self.notifier).__name__)
        self.notifier.send(message)
        self.logger.log("Notification sent to " + recipient)
