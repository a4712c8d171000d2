"""
Host services for the address bar.

This package contains the classes wiring the selection controller into the
Textual host, separated from the AddressBarApp class.
"""

from .container import ServiceContainer
from .search_session import SearchSession

__all__ = [
    "ServiceContainer",
    "SearchSession",
]
