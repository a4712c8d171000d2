"""Shortcut registry implementations."""

from autoselect.infrastructure.registry.memory import InMemoryShortcutRegistry
from autoselect.infrastructure.registry.sqlite import SqliteShortcutRegistry

__all__ = [
    "InMemoryShortcutRegistry",
    "SqliteShortcutRegistry",
]
