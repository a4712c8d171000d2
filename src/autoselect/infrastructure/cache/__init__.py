"""Caching implementations for autoselect."""

from autoselect.infrastructure.cache.classifier_cache import ClassifierCache

__all__ = [
    "ClassifierCache",
]
