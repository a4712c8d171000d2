"""Shortcut registry protocol."""

from typing import Protocol, Sequence

from autoselect.domain.types import SearchEngine, ShortcutRecord

__all__ = ["ShortcutRegistry"]


class ShortcutRegistry(Protocol):
    """Protocol for the keyword/alias storage backend.

    Search engine aliases are answered synchronously; stored bookmark
    keywords require an asynchronous round-trip to the backend.
    """

    def lookup_alias_sync(self, token: str) -> SearchEngine | None:
        """Return the search engine registered under ``token``, if any.

        Args:
            token: Candidate alias

        Returns:
            The engine for the alias, None otherwise
        """
        ...

    async def fetch_shortcut(self, token: str) -> ShortcutRecord | None:
        """Look up a stored bookmark keyword.

        Args:
            token: Candidate keyword

        Returns:
            The stored record, None if the keyword is unknown

        Raises:
            ShortcutLookupError: If the backend cannot be queried
        """
        ...

    async def bulk_list_all_shortcuts(self) -> Sequence[str]:
        """Return every keyword currently stored in the backend."""
        ...
