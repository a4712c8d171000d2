"""Exceptions raised inside autoselect.

None of these reach the host UI: classification errors are caught by the
InputClassifier and lookup errors by the KeywordClassifier.
"""

__all__ = [
    "AutoselectError",
    "InvalidURIError",
    "InvalidHostError",
    "ShortcutLookupError",
]


class AutoselectError(Exception):
    """Base class for all autoselect errors."""


class InvalidURIError(AutoselectError, ValueError):
    """Text is not a valid absolute URI."""


class InvalidHostError(AutoselectError, ValueError):
    """Text has no registrable host-like structure."""


class ShortcutLookupError(AutoselectError):
    """The shortcut storage backend failed to answer."""
