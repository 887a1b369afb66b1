"""
Message formatter - Single-responsibility message preparation.

Only builds the notification text. Sending and logging live elsewhere.
"""


class MessageFormatter:
    """Formats a recipient and content into a notification message."""

    def format_message(self, recipient: str, content: str) -> str:
        """
        Build the notification message.

        No trimming, escaping or validation is applied.

        Args:
            recipient: Recipient name
            content: Message body

        Returns:
            "Dear <recipient>, <content>"
        """
        return "Dear " + recipient + ", " + content
