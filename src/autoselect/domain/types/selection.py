"""Selection state owned by a single controller."""

from dataclasses import dataclass, field
from enum import Enum

__all__ = ["ControllerPhase", "ControllerState", "SelectionSnapshot", "NO_SELECTION"]

# Selection index meaning "nothing selected"
NO_SELECTION = -1


class ControllerPhase(Enum):
    """Observable phase of a SelectionController."""

    IDLE = "idle"
    AUTO_SELECTED = "auto_selected"
    AWAITING_RESULTS = "awaiting_results"


@dataclass
class SelectionSnapshot:
    """Field appearance captured when a suggestion gets auto-selected.

    Attributes:
        orig_search: The text the user actually typed (trimmed)
        orig_value: The full field value at that moment
    """

    orig_search: str = ""
    orig_value: str = ""


@dataclass
class ControllerState:
    """Mutable per-field state of a SelectionController."""

    awaiting_enter_result: bool = False
    snapshot: SelectionSnapshot = field(default_factory=SelectionSnapshot)
