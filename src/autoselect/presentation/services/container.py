"""
ServiceContainer - owns the process-wide classification services and
attaches one SelectionController per text field.

The ClassifierCache, KeywordClassifier and InputClassifier are created once
(lazily, on first access) and shared by every field; each attached field
gets its own controller and scheduler.
"""

from __future__ import annotations

from autoselect.application import (
    DeferredScheduler,
    InputClassifier,
    KeywordClassifier,
    SelectionController,
)
from autoselect.config import AutoselectConfig
from autoselect.domain.events import EventBus
from autoselect.domain.protocols import (
    SearchController,
    ShortcutRegistry,
    SuggestionList,
    TextField,
    URIClassifier,
)
from autoselect.infrastructure.cache import ClassifierCache
from autoselect.infrastructure.uri import UrlClassifier
from autoselect.logger import get_logger

logger = get_logger("service_container")


class ServiceContainer:
    """
    Manages the shared services with lazy initialization.

    Benefits:
    - One ClassifierCache for the whole process, injected rather than global
    - Clear dependency order (enforced by properties)
    - Controllers created per field through attach()
    """

    def __init__(
        self,
        registry: ShortcutRegistry,
        config: AutoselectConfig | None = None,
        *,
        uri: URIClassifier | None = None,
        cache: ClassifierCache | None = None,
    ):
        """
        Args:
            registry: Keyword/alias storage backend
            config: Controller configuration
            uri: URL/domain classifier (defaults to UrlClassifier)
            cache: Classification cache (defaults to a new ClassifierCache)
        """
        self.registry = registry
        self.config = config or AutoselectConfig()
        self._uri = uri
        self._cache = cache
        self._keywords: KeywordClassifier | None = None
        self._input_classifier: InputClassifier | None = None
        self._controllers: list[SelectionController] = []

    # -------------------------------------------------------------------------
    # Lazy Service Properties
    # -------------------------------------------------------------------------

    @property
    def cache(self) -> ClassifierCache:
        if self._cache is None:
            self._cache = ClassifierCache()
        return self._cache

    @property
    def uri(self) -> URIClassifier:
        if self._uri is None:
            self._uri = UrlClassifier()
        return self._uri

    @property
    def keywords(self) -> KeywordClassifier:
        if self._keywords is None:
            self._keywords = KeywordClassifier(self.registry, self.cache)
        return self._keywords

    @property
    def input_classifier(self) -> InputClassifier:
        if self._input_classifier is None:
            self._input_classifier = InputClassifier(self.uri, self.keywords)
        return self._input_classifier

    @property
    def controllers(self) -> list[SelectionController]:
        return list(self._controllers)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    async def warm(self) -> int:
        """Pre-load stored keywords if enabled in the configuration."""
        if not self.config.prewarm:
            logger.info("Keyword cache warm-up disabled")
            return 0
        return await self.keywords.warm()

    def attach(
        self,
        field: TextField,
        suggestions: SuggestionList,
        search: SearchController,
        bus: EventBus,
    ) -> SelectionController:
        """Create and attach the SelectionController for one field."""
        controller = SelectionController(
            field,
            suggestions,
            search,
            bus,
            self.input_classifier,
            DeferredScheduler(),
            max_wait_ms=self.config.max_wait_ms,
        ).attach()
        self._controllers.append(controller)
        logger.info(f"Attached selection controller #{len(self._controllers)}")
        return controller

    def detach_all(self) -> None:
        for controller in self._controllers:
            controller.detach()
        self._controllers.clear()
