"""Presentation layer: the Textual address bar host."""
