"""Application layer: classifiers, scheduler and the selection controller."""

from autoselect.application.input_classifier import InputClassifier
from autoselect.application.keyword_classifier import KeywordClassifier
from autoselect.application.scheduler import DeferredScheduler, DeferredTask
from autoselect.application.selection_controller import SelectionController

__all__ = [
    "InputClassifier",
    "KeywordClassifier",
    "DeferredScheduler",
    "DeferredTask",
    "SelectionController",
]
