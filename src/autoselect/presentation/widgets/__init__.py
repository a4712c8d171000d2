"""Textual widgets of the address bar host."""

from .address_input import AddressField, AddressInput
from .suggestion_list import SuggestionList

__all__ = [
    "AddressField",
    "AddressInput",
    "SuggestionList",
]
