"""Domain protocols - interfaces for the external collaborators.

The selection controller only talks to these structural types, so the host
toolkit, the keyword backend and the URL parser can be swapped freely (and
replaced by plain fakes in tests).
"""

from autoselect.domain.protocols.registry import ShortcutRegistry
from autoselect.domain.protocols.uri import URIClassifier
from autoselect.domain.protocols.widgets import SearchController, SuggestionList, TextField

__all__ = [
    "ShortcutRegistry",
    "URIClassifier",
    "SearchController",
    "SuggestionList",
    "TextField",
]
