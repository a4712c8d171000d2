"""
AddressBarApp - Textual host demonstrating the selection controller.
"""

import asyncio
from typing import Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Input, RichLog

from autoselect.application import SelectionController
from autoselect.domain.events import EventBus
from autoselect.domain.types import Suggestion
from autoselect.logger import get_logger
from autoselect.presentation.services import SearchSession, ServiceContainer
from autoselect.presentation.widgets import AddressField, AddressInput, SuggestionList

logger = get_logger("address_bar_app")


class AddressBarApp(App):
    """
    Address bar with an asynchronously populated suggestion list.

    Layout:
    ┌─────────────────────────────────────────┐
    │               Header                    │
    ├─────────────────────────────────────────┤
    │          Address Input                  │
    │          Suggestion List (popup)        │
    ├─────────────────────────────────────────┤
    │          Committed targets log          │
    ├─────────────────────────────────────────┤
    │               Footer                    │
    └─────────────────────────────────────────┘
    """

    TITLE = "autoselect"
    SUB_TITLE = "Enter selects the first suggestion"

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
    ]

    def __init__(self, container: ServiceContainer, history: Sequence[Suggestion] = ()):
        """
        Args:
            container: Shared services; the field's controller is attached on mount
            history: Entries the demo search matches against
        """
        super().__init__()
        self.container = container
        self.history = list(history)
        self.bus = EventBus()
        self.committed: list[str] = []
        self.field: AddressField | None = None
        self.session: SearchSession | None = None
        self.controller: SelectionController | None = None
        self._background_tasks: set[asyncio.Task] = set()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="address-bar"):
            yield AddressInput(self.bus, id="address")
            yield SuggestionList(self.bus, id="suggestions")
        yield RichLog(id="committed", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        address = self.query_one(AddressInput)
        suggestions = self.query_one(SuggestionList)

        self.field = AddressField(address)
        self.session = SearchSession(
            self.field,
            suggestions,
            self.history,
            on_commit=self._record_commit,
            delay_ms=self.container.config.search_delay_ms,
        )
        self.field.on_commit = self.session.commit
        address.session = self.session

        # The host's own listeners are in place; the controller comes last
        self.controller = self.container.attach(self.field, suggestions, self.session, self.bus)

        task = asyncio.create_task(self.container.warm())
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

        address.focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.session is not None:
            self.session.start(event.value)

    def _record_commit(self, value: str) -> None:
        self.committed.append(value)
        self.query_one("#committed", RichLog).write(Text.assemble(("→ ", "bold green"), value))

    async def on_unmount(self) -> None:
        if self.session is not None:
            self.session.cancel()
        self.container.detach_all()
