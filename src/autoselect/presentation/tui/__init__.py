"""Textual host application."""

from .address_bar_app import AddressBarApp

__all__ = ["AddressBarApp"]
