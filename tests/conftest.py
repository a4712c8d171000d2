"""Shared fakes and fixtures for autoselect tests."""

from dataclasses import dataclass, field

import pytest

from autoselect.application import (
    DeferredScheduler,
    DeferredTask,
    InputClassifier,
    KeywordClassifier,
    SelectionController,
)
from autoselect.domain.events import EntryAppended, EventBus, KeyPressed
from autoselect.domain.types import Key, Modifiers, SearchEngine, SearchStatus
from autoselect.infrastructure.cache import ClassifierCache
from autoselect.infrastructure.registry import InMemoryShortcutRegistry
from autoselect.infrastructure.uri import UrlClassifier


class FakeTextField:
    """TextField with an explicit selection, like a browser address bar."""

    def __init__(self, value: str = ""):
        self.value = value
        self.selection_start = len(value)
        self.selection_end = len(value)
        self.commits: list[str] = []

    def type(self, text: str) -> None:
        self.value = text
        self.selection_start = self.selection_end = len(text)

    def autofill(self, typed: str, completed: str) -> None:
        """Show ``completed`` with the untyped remainder selected."""
        self.value = completed
        self.selection_start = len(typed)
        self.selection_end = len(completed)

    def commit_current_text(self) -> None:
        self.commits.append(self.value)


class FakeSuggestionList:
    def __init__(self, bus: EventBus):
        self.bus = bus
        self.count = 0
        self.selected_index = -1
        self.is_open = True

    def append(self, n: int = 1) -> None:
        for _ in range(n):
            self.count += 1
            self.bus.publish(EntryAppended(index=self.count - 1, count=self.count))


class FakeSearch:
    def __init__(self, suggestions: FakeSuggestionList):
        self.suggestions = suggestions
        self.status = SearchStatus.SEARCHING
        self.navigations: list[Key] = []
        self.selection_commits = 0

    @property
    def match_count(self) -> int:
        return self.suggestions.count

    def navigate(self, direction: Key) -> None:
        self.navigations.append(direction)
        if direction is Key.DOWN:
            self.suggestions.selected_index += 1

    def commit_selection(self) -> None:
        self.selection_commits += 1


class RecordingScheduler(DeferredScheduler):
    """Scheduler that records tasks instead of arming them on the loop."""

    def __init__(self):
        super().__init__()
        self.scheduled: list[DeferredTask] = []

    def _arm(self, task: DeferredTask) -> None:
        self.scheduled.append(task)

    def run_pending(self) -> None:
        for task in list(self.scheduled):
            if task.pending:
                self._fire(task)

    @property
    def pending(self) -> list[DeferredTask]:
        return [task for task in self.scheduled if task.pending]


@pytest.fixture(scope="session")
def uri() -> UrlClassifier:
    return UrlClassifier()


@pytest.fixture
def registry() -> InMemoryShortcutRegistry:
    return InMemoryShortcutRegistry(
        engines=[SearchEngine(name="Wikipedia", alias="wiki")],
        keywords={"weather": "https://weather.example/?q=%s"},
    )


@pytest.fixture
def cache() -> ClassifierCache:
    return ClassifierCache()


@pytest.fixture
def keywords(registry, cache) -> KeywordClassifier:
    return KeywordClassifier(registry, cache)


@pytest.fixture
def classifier(uri, keywords) -> InputClassifier:
    return InputClassifier(uri, keywords)


@dataclass
class Harness:
    text_field: FakeTextField
    suggestions: FakeSuggestionList
    search: FakeSearch
    bus: EventBus
    scheduler: DeferredScheduler
    controller: SelectionController
    published: list[KeyPressed] = field(default_factory=list)

    def press(self, key: Key, **modifiers: bool) -> KeyPressed:
        pressed = KeyPressed(key=key, modifiers=Modifiers(**modifiers))
        self.bus.publish(pressed)
        self.published.append(pressed)
        return pressed


def make_harness(classifier: InputClassifier, scheduler: DeferredScheduler) -> Harness:
    bus = EventBus()
    text_field = FakeTextField()
    suggestions = FakeSuggestionList(bus)
    search = FakeSearch(suggestions)
    controller = SelectionController(
        text_field, suggestions, search, bus, classifier, scheduler, max_wait_ms=350
    ).attach()
    return Harness(text_field, suggestions, search, bus, scheduler, controller)


@pytest.fixture
def harness(classifier) -> Harness:
    return make_harness(classifier, RecordingScheduler())
