"""URI classification implementations."""

from autoselect.infrastructure.uri.url_classifier import UrlClassifier

__all__ = [
    "UrlClassifier",
]
