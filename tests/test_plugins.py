"""
Tests for plugin resolution.

Tests cover:
- Registry registration and lookup order
- Entry point and dotted-path resolution
- Fail-fast validation naming the first unresolvable identifier
"""

import json
import os.path
from importlib.metadata import EntryPoint
from pathlib import Path

import pytest

from theme_config.config import parse_record
from theme_config.errors import PluginResolutionError
from theme_config.models import ConfigurationRecord
from theme_config.plugins import PluginRegistry, validate_plugins
from theme_config.plugins import registry as registry_module


def _record(*plugins):
    return ConfigurationRecord(content_patterns=["index.html"], plugins=list(plugins))


@pytest.fixture
def registry() -> PluginRegistry:
    return PluginRegistry()


@pytest.fixture
def fake_entry_points(monkeypatch):
    """Replace installed entry points with a fixed list."""

    def _install(*eps: EntryPoint) -> None:
        monkeypatch.setattr(registry_module, "entry_points", lambda group: list(eps))

    _install()
    return _install


class TestPluginRegistry:
    """Tests for PluginRegistry."""

    def test_register_and_resolve(self, registry, fake_entry_points):
        """Registered plugins resolve by identifier."""
        plugin = object()
        registry.register("forms", plugin)
        assert registry.resolve("forms") is plugin

    def test_register_twice_rejected(self, registry):
        registry.register("forms", object())
        with pytest.raises(ValueError):
            registry.register("forms", object())

    def test_unregister(self, registry, fake_entry_points):
        """Unregistered identifiers no longer resolve."""
        registry.register("forms", object())
        registry.unregister("forms")
        registry.unregister("forms")
        with pytest.raises(PluginResolutionError):
            registry.resolve("forms")

    def test_callable_handle_passes_through(self, registry):
        """Callables are already loaded."""

        def plugin(api):
            return api

        assert registry.resolve(plugin) is plugin

    def test_entry_point(self, registry, fake_entry_points):
        """Installed entry points resolve by name."""
        fake_entry_points(
            EntryPoint(name="json-loader", value="json:loads", group="theme_config.plugins")
        )
        assert registry.resolve("json-loader") is json.loads

    def test_registered_wins_over_entry_point(self, registry, fake_entry_points):
        """Code registrations are checked first."""
        fake_entry_points(
            EntryPoint(name="forms", value="json:loads", group="theme_config.plugins")
        )
        plugin = object()
        registry.register("forms", plugin)
        assert registry.resolve("forms") is plugin

    def test_broken_entry_point(self, registry, fake_entry_points):
        """An entry point that fails to import is a resolution error."""
        fake_entry_points(
            EntryPoint(
                name="broken",
                value="theme_config_missing_module:plugin",
                group="theme_config.plugins",
            )
        )
        with pytest.raises(PluginResolutionError) as exc_info:
            registry.resolve("broken")
        assert exc_info.value.identifier == "broken"

    def test_dotted_module(self, registry, fake_entry_points):
        """A module path resolves to the module."""
        assert registry.resolve("json") is json

    def test_dotted_attribute(self, registry, fake_entry_points):
        """module:attr resolves to the attribute."""
        assert registry.resolve("os.path:join") is os.path.join

    def test_missing_attribute(self, registry, fake_entry_points):
        with pytest.raises(PluginResolutionError) as exc_info:
            registry.resolve("json:no_such_plugin")
        assert exc_info.value.identifier == "json:no_such_plugin"

    def test_missing_dependency_inside_plugin(
        self, registry, fake_entry_points, tmp_path: Path, monkeypatch
    ):
        """A plugin whose own imports fail reports the load failure."""
        (tmp_path / "theme_config_broken_plugin.py").write_text(
            "import theme_config_dependency_that_is_missing\n"
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        with pytest.raises(PluginResolutionError) as exc_info:
            registry.resolve("theme_config_broken_plugin")
        assert exc_info.value.identifier == "theme_config_broken_plugin"
        assert "failed to load" in str(exc_info.value)

    def test_list_plugins(self, registry, fake_entry_points):
        """Lists registered and installed identifiers."""
        fake_entry_points(
            EntryPoint(name="typography", value="json:loads", group="theme_config.plugins")
        )
        registry.register("forms", object())
        assert registry.list_plugins() == ["forms", "typography"]


class TestValidatePlugins:
    """Tests for validate_plugins."""

    def test_empty_plugins_ok(self, registry):
        """No plugins is valid."""
        assert validate_plugins(_record(), registry) == ()

    def test_nonexistent_plugin(self, registry, fake_entry_points):
        """An unknown identifier is named in the error."""
        record = parse_record(
            {"contentPatterns": ["index.html"], "plugins": ["nonexistent-plugin"]}
        )
        with pytest.raises(PluginResolutionError) as exc_info:
            validate_plugins(record, registry)
        assert exc_info.value.identifier == "nonexistent-plugin"
        assert "nonexistent-plugin" in str(exc_info.value)

    def test_fails_on_first_unresolvable(self, registry, fake_entry_points):
        """Resolution stops at the first miss, in record order."""
        registry.register("forms", object())
        record = _record("forms", "missing-one", "missing-two")
        with pytest.raises(PluginResolutionError) as exc_info:
            validate_plugins(record, registry)
        assert exc_info.value.identifier == "missing-one"

    def test_returns_plugins_in_order(self, registry, fake_entry_points):
        """Loaded plugins keep record order."""
        forms = object()
        registry.register("forms", forms)
        plugins = validate_plugins(_record("json", "forms"), registry)
        assert plugins == (json, forms)

    def test_default_registry(self, fake_entry_points):
        """The module registry is used when none is given."""
        assert validate_plugins(_record("json")) == (json,)
