"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Recording fakes for the Notifier and Logger ports
- Settings cache isolation
"""

from collections.abc import Generator

import pytest

from solid_notify.config.settings import get_settings


class RecordingNotifier:
    """Notifier fake that appends every call to a shared event list."""

    def __init__(self, events: list[tuple[str, str]]) -> None:
        self.events = events

    def send(self, message: str) -> None:
        self.events.append(("send", message))


class RecordingLogger:
    """Logger fake that appends every call to a shared event list."""

    def __init__(self, events: list[tuple[str, str]]) -> None:
        self.events = events

    def log(self, info: str) -> None:
        self.events.append(("log", info))


@pytest.fixture
def events() -> list[tuple[str, str]]:
    """Ordered record of port calls shared by the recording fakes."""
    return []


@pytest.fixture
def recording_notifier(events: list[tuple[str, str]]) -> RecordingNotifier:
    return RecordingNotifier(events)


@pytest.fixture
def recording_logger(events: list[tuple[str, str]]) -> RecordingLogger:
    return RecordingLogger(events)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """Ensure each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
