"""
Theme configuration resolver for utility-class CSS generators.

Loads a declarative config record, merges its design-token extensions over
built-in defaults, resolves content globs into the files to scan, and
checks that the requested plugins load.
"""

from theme_config.config import ConfigLoader, load, parse_record
from theme_config.content import ResolvedContentSet, resolve_content_set
from theme_config.defaults import DEFAULT_THEME
from theme_config.errors import (
    ConfigNotFoundError,
    MalformedConfigError,
    NoMatchWarning,
    PluginResolutionError,
    SchemaViolationError,
    ThemeConfigError,
)
from theme_config.models import ConfigurationRecord, Diagnostic, DiagnosticSeverity, ResolvedTheme
from theme_config.plugins import PluginRegistry, validate_plugins
from theme_config.resolver import BuildInputs, ThemeConfigResolver
from theme_config.theme import ThemeResolver, resolve_theme

__version__ = "0.1.0"

__all__ = [
    "BuildInputs",
    "ConfigLoader",
    "ConfigNotFoundError",
    "ConfigurationRecord",
    "DEFAULT_THEME",
    "Diagnostic",
    "DiagnosticSeverity",
    "MalformedConfigError",
    "NoMatchWarning",
    "PluginRegistry",
    "PluginResolutionError",
    "ResolvedContentSet",
    "ResolvedTheme",
    "SchemaViolationError",
    "ThemeConfigError",
    "ThemeConfigResolver",
    "ThemeResolver",
    "load",
    "parse_record",
    "resolve_content_set",
    "resolve_theme",
    "validate_plugins",
]
