"""URI classification protocol."""

from typing import Protocol

__all__ = ["URIClassifier"]


class URIClassifier(Protocol):
    """Protocol for URL/domain syntax checks."""

    def parse_as_uri(self, text: str) -> str:
        """Parse ``text`` as an absolute URI.

        Returns:
            The normalized URI

        Raises:
            InvalidURIError: If ``text`` is not an absolute URI
        """
        ...

    def parse_base_domain(self, text: str) -> str:
        """Extract the registrable base domain of ``text`` taken as a host.

        Returns:
            The base domain (e.g. ``example.co.uk``)

        Raises:
            InvalidHostError: If ``text`` has no valid host-like structure
        """
        ...
