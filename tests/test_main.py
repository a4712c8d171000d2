"""Basic tests for the command line entry point."""

from unittest.mock import patch

from typer.testing import CliRunner

from autoselect.config import AutoselectConfig
from autoselect.infrastructure.registry import InMemoryShortcutRegistry, SqliteShortcutRegistry
from autoselect.main import DEFAULT_ENGINES, build_registry, cli


class TestMainApplication:
    """Test suite for the main application."""

    def test_in_memory_registry_by_default(self):
        registry = build_registry(AutoselectConfig())

        assert isinstance(registry, InMemoryShortcutRegistry)
        assert registry.lookup_alias_sync("ddg") == DEFAULT_ENGINES[0]

    def test_sqlite_registry_when_configured(self, tmp_path):
        registry = build_registry(AutoselectConfig(shortcut_db=str(tmp_path / "k.db")))

        assert isinstance(registry, SqliteShortcutRegistry)
        assert registry.lookup_alias_sync("wiki") is not None

    def test_cli_options_reach_the_app(self, tmp_path, monkeypatch):
        monkeypatch.delenv("AUTOSELECT_MAX_WAIT_MS", raising=False)
        runner = CliRunner()

        with (
            patch("autoselect.main.setup_logger"),
            patch("autoselect.main.AddressBarApp") as app_cls,
        ):
            result = runner.invoke(
                cli,
                ["--max-wait-ms", "500", "--no-prewarm", "--shortcut-db", str(tmp_path / "k.db")],
            )

        assert result.exit_code == 0, result.output
        container = app_cls.call_args.args[0]
        assert container.config.max_wait_ms == 500
        assert container.config.prewarm is False
        assert isinstance(container.registry, SqliteShortcutRegistry)
        app_cls.return_value.run.assert_called_once()
