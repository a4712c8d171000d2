from typing import Optional

import typer
from dotenv import load_dotenv

from autoselect.config import AutoselectConfig, load_config
from autoselect.domain.types import SearchEngine, Suggestion
from autoselect.infrastructure.registry import InMemoryShortcutRegistry, SqliteShortcutRegistry
from autoselect.logger import get_logger, setup_logger
from autoselect.presentation.services import ServiceContainer
from autoselect.presentation.tui import AddressBarApp

load_dotenv()

logger = get_logger("main")

DEFAULT_ENGINES = [
    SearchEngine(name="DuckDuckGo", alias="ddg", url_template="https://duckduckgo.com/?q={query}"),
    SearchEngine(name="Wikipedia", alias="wiki", url_template="https://en.wikipedia.org/wiki/{query}"),
]

DEFAULT_KEYWORDS = {
    "gh": "https://github.com/search?q=%s",
    "py": "https://docs.python.org/3/search.html?q=%s",
}

DEFAULT_HISTORY = [
    Suggestion(value="https://en.wikipedia.org/wiki/Cat", label="Cat - Wikipedia"),
    Suggestion(value="https://www.catster.com/", label="Catster: cats and cat care"),
    Suggestion(value="https://docs.python.org/3/", label="Python 3 documentation"),
    Suggestion(value="https://textual.textualize.io/", label="Textual"),
    Suggestion(value="https://github.com/Delgan/loguru", label="loguru on GitHub"),
    Suggestion(value="https://www.weather.gov/", label="National Weather Service"),
]


def build_registry(config: AutoselectConfig):
    if config.shortcut_db:
        registry = SqliteShortcutRegistry(config.shortcut_db, engines=DEFAULT_ENGINES)
        logger.info(f"Using keyword store at {config.shortcut_db}")
        return registry
    return InMemoryShortcutRegistry(engines=DEFAULT_ENGINES, keywords=DEFAULT_KEYWORDS)


cli = typer.Typer(
    name="autoselect",
    help="Address bar demo where Enter selects the first suggestion",
    epilog="""
    Examples:
    $ autoselect --max-wait-ms 500 --shortcut-db keywords.sqlite
    """,
    add_completion=False,
)


@cli.command()
def main(
    max_wait_ms: Optional[float] = typer.Option(None, "--max-wait-ms", help="Upper bound of the Enter wait"),
    shortcut_db: Optional[str] = typer.Option(None, "--shortcut-db", help="SQLite keyword store"),
    search_delay_ms: Optional[float] = typer.Option(None, "--search-delay-ms", help="Demo delay between results"),
    no_prewarm: bool = typer.Option(False, "--no-prewarm", help="Skip loading stored keywords at startup"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Launch the address bar demo."""
    config = load_config()
    if max_wait_ms is not None:
        config.max_wait_ms = max_wait_ms
    if shortcut_db is not None:
        config.shortcut_db = shortcut_db
    if search_delay_ms is not None:
        config.search_delay_ms = search_delay_ms
    if no_prewarm:
        config.prewarm = False
    if debug:
        config.log_level = "DEBUG"

    setup_logger(log_file=config.log_file, log_level=config.log_level)
    logger.info(f"Starting autoselect (max_wait_ms={config.max_wait_ms}, prewarm={config.prewarm})")

    container = ServiceContainer(build_registry(config), config)
    AddressBarApp(container, history=DEFAULT_HISTORY).run()


def run():
    cli()


if __name__ == "__main__":
    run()
