"""
Utility functions for autoselect.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/autoselect).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def typed_prefix(value: str, selection_start: int, selection_end: int) -> str:
    """
    Return the part of a field value the user actually typed.

    When the selection runs to the end of the value, everything after the
    selection start is an inline completion the user did not type.

    Args:
        value: Full field value
        selection_start: Start offset of the selection (the caret when empty)
        selection_end: End offset of the selection

    Returns:
        The typed text with surrounding whitespace removed
    """
    if selection_end == len(value):
        value = value[:selection_start]
    return value.strip()
