"""
Console notifier adapters - Implement the Notifier protocol.

Each channel prints the message with a channel label instead of talking
to a real gateway. Swapping EmailNotifier for SMSNotifier changes only
the label on the output line.
"""

import logging
import sys
from typing import TextIO

from solid_notify.domain.exceptions import DeliveryFailure

logger = logging.getLogger(__name__)


def _emit(stream: TextIO | None, channel: str, message: str) -> None:
    # Resolve stdout per call so redirected streams are honoured.
    out = stream if stream is not None else sys.stdout
    try:
        print(f"Sending {channel}: {message}", file=out)
    except (OSError, ValueError) as exc:
        raise DeliveryFailure(channel, message) from exc
    logger.debug("[%s] delivered %d chars", channel, len(message))


class EmailNotifier:
    """
    Implements Notifier protocol for the email channel.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    channel = "Email"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, message: str) -> None:
        """
        Print the message tagged as an email (simulates delivery).

        Raises:
            DeliveryFailure: If the output stream cannot be written or is closed
        """
        _emit(self._stream, self.channel, message)


class SMSNotifier:
    """Implements Notifier protocol for the SMS channel."""

    channel = "SMS"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, message: str) -> None:
        """Print the message tagged as an SMS (simulates delivery)."""
        _emit(self._stream, self.channel, message)
