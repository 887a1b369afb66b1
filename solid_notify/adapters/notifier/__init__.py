"""Notifier adapters - Channel implementations."""

from .console import EmailNotifier, SMSNotifier

__all__ = ["EmailNotifier", "SMSNotifier"]
