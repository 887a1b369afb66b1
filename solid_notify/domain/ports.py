"""
Port interfaces - Protocol definitions for delivery and logging sinks.

This module defines the capabilities the notification service depends on.
Adapters implement these protocols through structural subtyping, so new
channels and sinks can be added without touching the service.
"""

from typing import Protocol


class Notifier(Protocol):
    """Port interface for delivering a message through a channel."""

    def send(self, message: str) -> None:
        """
        Deliver an already formatted message.

        Args:
            message: Formatted notification text
        """
        ...


class Logger(Protocol):
    """Port interface for recording an informational event."""

    def log(self, info: str) -> None:
        """
        Record an informational string.

        Args:
            info: Event description
        """
        ...
