"""
SelectionController - pre-selects the first real suggestion of a field.

The controller reconciles three racing sources of information: the text
caret, the asynchronously growing suggestion list and the asynchronous
classification of the typed text. It runs entirely inside event handlers
and deferred callbacks on one event loop, so no locking is needed; every
deferred callback re-validates its preconditions when it fires instead.

Behaviour:
    - When results arrive and the typed text is neither a URL, a
      domain-like string nor a shortcut, the entry at ``TARGET_INDEX`` is
      shown as selected without the user navigating to it.
    - Horizontal caret keys drop that selection so the field stays editable.
    - After vertical navigation leaves nothing selected, the field shows the
      text it had when the selection was made.
    - Enter with no results yet is held back for a short, length-scaled wait;
      the first result commits the selection, a timeout commits the raw text.
"""

from __future__ import annotations

from autoselect.application.input_classifier import InputClassifier
from autoselect.application.scheduler import DeferredScheduler
from autoselect.config import MAX_WAIT_MS, TARGET_INDEX
from autoselect.domain.events import EntryAppended, EventBus, KeyPressed
from autoselect.domain.protocols import SearchController, SuggestionList, TextField
from autoselect.domain.types import (
    HORIZONTAL_KEYS,
    NO_SELECTION,
    VERTICAL_KEYS,
    ControllerPhase,
    ControllerState,
    Key,
    SelectionSnapshot,
)
from autoselect.logger import get_logger
from autoselect.utils import typed_prefix

logger = get_logger("selection_controller")

# Deferred-task keys; a new task for the same purpose replaces the pending one
_RESTORE_KEY = "restore-completion"
_ENTER_WAIT_KEY = "enter-wait"


class SelectionController:
    """Per-field pre-selection state machine."""

    def __init__(
        self,
        field: TextField,
        suggestions: SuggestionList,
        search: SearchController,
        bus: EventBus,
        classifier: InputClassifier,
        scheduler: DeferredScheduler | None = None,
        *,
        max_wait_ms: float = MAX_WAIT_MS,
    ):
        """
        Args:
            field: The text field being typed into
            suggestions: The suggestion list shown for the field
            search: The host's search driver (status, navigation, commit)
            bus: The field's event bus; the controller subscribes on attach()
            classifier: Shared input classifier
            scheduler: Scheduler for deferred checks (one per controller)
            max_wait_ms: Upper bound of the Enter wait, divided by input length
        """
        self.field = field
        self.suggestions = suggestions
        self.search = search
        self.bus = bus
        self.classifier = classifier
        self.scheduler = scheduler or DeferredScheduler()
        self.max_wait_ms = max_wait_ms
        self.state = ControllerState()
        self._attached = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def attach(self) -> "SelectionController":
        """Subscribe to the field's events."""
        if not self._attached:
            self.bus.subscribe(EntryAppended, self.on_entry_appended)
            self.bus.subscribe(KeyPressed, self.on_key_pressed)
            self._attached = True
        return self

    def detach(self) -> None:
        """Unsubscribe and drop every pending deferred check."""
        if self._attached:
            self.bus.unsubscribe(EntryAppended, self.on_entry_appended)
            self.bus.unsubscribe(KeyPressed, self.on_key_pressed)
            self._attached = False
        self.scheduler.cancel_all()
        self.state.awaiting_enter_result = False

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def target_index(self) -> int:
        return TARGET_INDEX

    @property
    def snapshot(self) -> SelectionSnapshot:
        return self.state.snapshot

    @property
    def phase(self) -> ControllerPhase:
        if self.state.awaiting_enter_result:
            return ControllerPhase.AWAITING_RESULTS
        if self.suggestions.selected_index == self.target_index:
            return ControllerPhase.AUTO_SELECTED
        return ControllerPhase.IDLE

    def typed_text(self) -> str:
        """The part of the field the user actually typed, trimmed."""
        return typed_prefix(
            self.field.value,
            self.field.selection_start,
            self.field.selection_end,
        )

    def wait_delay_ms(self, entered: str) -> float:
        """Enter wait for ``entered``: shorter the more the user typed."""
        return self.max_wait_ms / len(entered)

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def on_entry_appended(self, event: EntryAppended) -> None:
        # Don't bother if something is already selected
        if self.suggestions.selected_index >= self.target_index:
            return

        if self.suggestions.count == 0:
            return

        # Don't auto-select over a URL, domain or shortcut
        current = self.typed_text()
        if self.classifier.host_will_handle(current):
            return

        self.state.snapshot = SelectionSnapshot(orig_search=current, orig_value=self.field.value)
        self.suggestions.selected_index = self.target_index
        logger.debug(f"Auto-selected entry {self.target_index} for {current!r}")

        if self.state.awaiting_enter_result:
            # The held-back Enter now commits the selection
            self.state.awaiting_enter_result = False
            logger.debug("Results arrived while awaiting Enter, committing selection")
            self.scheduler.schedule(self.search.commit_selection)

    # -------------------------------------------------------------------------
    # Keys
    # -------------------------------------------------------------------------

    def on_key_pressed(self, event: KeyPressed) -> None:
        if event.key in HORIZONTAL_KEYS:
            # Unselect so the caret movement edits the text
            self.suggestions.selected_index = NO_SELECTION
        elif event.key in VERTICAL_KEYS:
            # Check once the host has finished moving the selection
            self.scheduler.schedule(self._restore_completion, key=_RESTORE_KEY)
        elif event.key is Key.ENTER:
            if event.modifiers.any:
                return
            self._handle_enter(event)

    def _restore_completion(self) -> None:
        if self.suggestions.selected_index == NO_SELECTION and self.suggestions.is_open:
            snapshot = self.state.snapshot
            self.field.value = snapshot.orig_value
            self.field.selection_start = len(snapshot.orig_search)
            logger.debug(f"Restored field to {snapshot.orig_value!r}")

    def _handle_enter(self, event: KeyPressed) -> None:
        if self.search.match_count == 0 and self.search.status.in_progress:
            entered = self.typed_text()
            if not entered or self.classifier.host_will_handle(entered):
                return

            # Hold the Enter back until results show up
            event.prevent_default()
            self.state.awaiting_enter_result = True

            delay = self.wait_delay_ms(entered)
            self.scheduler.schedule(
                lambda: self._enter_wait_expired(entered), delay, key=_ENTER_WAIT_KEY
            )
            logger.debug(f"Enter held for {entered!r}, waiting {delay:.1f}ms for results")
            return

        # Act as if the user moved down onto the auto-selected entry, so the
        # field holds its value and the host associates the input with it
        if self.suggestions.selected_index == self.target_index:
            self.suggestions.selected_index = self.target_index - 1
            self.search.navigate(Key.DOWN)

    def _enter_wait_expired(self, entered: str) -> None:
        # Stale if the user kept typing or results arrived in the meantime
        if entered != self.typed_text() or self.search.match_count != 0:
            return
        self.state.awaiting_enter_result = False
        logger.debug(f"No results for {entered!r}, committing typed text")
        self.field.commit_current_text()
