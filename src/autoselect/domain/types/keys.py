"""Key-related domain types."""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Key", "Modifiers", "HORIZONTAL_KEYS", "VERTICAL_KEYS"]


class Key(Enum):
    """Keys the selection controller reacts to.

    Everything else typed into the field is reported as ``OTHER``.
    """

    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    TAB = "tab"
    ENTER = "enter"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "Key":
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Modifiers:
    """Modifier keys held while a key was pressed."""

    shift: bool = False
    ctrl: bool = False
    meta: bool = False

    @property
    def any(self) -> bool:
        return self.shift or self.ctrl or self.meta

    @classmethod
    def from_names(cls, names: set[str]) -> "Modifiers":
        return cls(
            shift="shift" in names,
            ctrl="ctrl" in names,
            meta="meta" in names or "super" in names,
        )


# Keys that move the caret inside the field
HORIZONTAL_KEYS = frozenset({Key.LEFT, Key.RIGHT, Key.HOME})

# Keys that move the selection inside the suggestion list
VERTICAL_KEYS = frozenset({Key.UP, Key.DOWN, Key.PAGE_UP, Key.PAGE_DOWN, Key.TAB})
