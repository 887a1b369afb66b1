"""Logger adapters - Event sink implementations."""

from .console import ConsoleLogger

__all__ = ["ConsoleLogger"]
