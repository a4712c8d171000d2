"""Enter-selects autocomplete controller for asynchronously populated suggestion lists."""

__version__ = "0.1.0"
