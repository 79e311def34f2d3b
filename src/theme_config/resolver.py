"""
Theme config resolver - runs one build's resolution end to end.

Loads the record, validates plugins, then resolves the theme and the
content set. The downstream generator only ever sees the BuildInputs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from theme_config.config.loader import ConfigLoader
from theme_config.content.scanner import ResolvedContentSet, resolve_content_set
from theme_config.defaults import DEFAULT_THEME
from theme_config.models.config import ConfigurationRecord
from theme_config.models.diagnostics import Diagnostic
from theme_config.models.theme import ResolvedTheme
from theme_config.plugins.registry import PluginRegistry, default_registry
from theme_config.theme.resolver import ThemeResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildInputs:
    """Everything the generator needs for one build."""

    theme: ResolvedTheme
    content: ResolvedContentSet
    plugins: tuple[Any, ...] = ()
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.diagnostics)


class ThemeConfigResolver:
    """
    Resolves configuration records for the CSS generator.

    Holds the defaults, loader and plugin registry; keeps no per-build state.
    """

    def __init__(
        self,
        defaults: ResolvedTheme | Mapping[str, Mapping[str, Any]] = DEFAULT_THEME,
        loader: ConfigLoader | None = None,
        plugin_registry: PluginRegistry | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            defaults: Built-in token set records extend
            loader: Config loader (default candidates if omitted)
            plugin_registry: Registry plugins resolve against
        """
        self.theme_resolver = ThemeResolver(defaults)
        self.loader = loader or ConfigLoader()
        self.plugin_registry = plugin_registry or default_registry

    @property
    def defaults(self) -> ResolvedTheme:
        return self.theme_resolver.defaults

    def load(self, path: Path | str) -> ConfigurationRecord:
        """Read and validate a config file."""
        return self.loader.load(path)

    def resolve_theme(self, record: ConfigurationRecord) -> ResolvedTheme:
        """Merge the record's tokens over the defaults."""
        return self.theme_resolver.resolve(record)

    def resolve_content_set(
        self, record: ConfigurationRecord, cwd: Path | str
    ) -> ResolvedContentSet:
        """Resolve the record's content patterns against ``cwd``."""
        return resolve_content_set(record, cwd)

    def validate_plugins(self, record: ConfigurationRecord) -> tuple[Any, ...]:
        """Resolve the record's plugins, failing on the first miss."""
        return self.plugin_registry.resolve_all(record)

    def resolve_record(self, record: ConfigurationRecord, cwd: Path | str) -> BuildInputs:
        """
        Resolve an already-loaded record.

        Args:
            record: Validated configuration record
            cwd: Directory content patterns are resolved against

        Returns:
            Build inputs with diagnostics collected
        """
        plugins = self.validate_plugins(record)
        theme = self.resolve_theme(record)
        content = self.resolve_content_set(record, cwd)

        diagnostics = self.theme_resolver.diagnostics(record)
        diagnostics.extend(Diagnostic.from_no_match(warning) for warning in content.warnings)

        return BuildInputs(
            theme=theme,
            content=content,
            plugins=plugins,
            diagnostics=diagnostics,
        )

    def resolve(self, path: Path | str, cwd: Path | str | None = None) -> BuildInputs:
        """
        Load a config file and resolve it.

        Args:
            path: Config file
            cwd: Content root (the config file's directory if omitted)

        Returns:
            Build inputs with diagnostics collected
        """
        path = Path(path)
        record = self.load(path)
        root = Path(cwd) if cwd is not None else path.parent
        inputs = self.resolve_record(record, root)
        logger.info(f"Resolved {path} with {len(inputs.diagnostics)} diagnostic(s)")
        return inputs
