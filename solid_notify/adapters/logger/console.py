"""
Console logger adapter - Implements the Logger protocol.

Records notification events as plain stdout lines. This is the domain
Logger capability, separate from the package's own `logging` records
which go to stderr.
"""

import logging
import sys
from typing import TextIO

from solid_notify.domain.exceptions import LogWriteFailure

logger = logging.getLogger(__name__)


class ConsoleLogger:
    """
    Implements Logger protocol via console output.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def log(self, info: str) -> None:
        """
        Print the entry with a fixed "Logging: " prefix.

        Args:
            info: Event description

        Raises:
            LogWriteFailure: If the output stream cannot be written or is closed
        """
        out = self._stream if self._stream is not None else sys.stdout
        try:
            print(f"Logging: {info}", file=out)
        except (OSError, ValueError) as exc:
            raise LogWriteFailure(info) from exc
        logger.debug("Recorded entry: %s", info)
