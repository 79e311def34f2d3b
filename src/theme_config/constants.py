"""
Constants for the theme configuration resolver.

No magic strings - file names, reserved keys and message templates live here.
"""

from enum import Enum

# Candidate config file names, in discovery order
CONFIG_FILENAMES: tuple[str, ...] = (
    "theme.config.yaml",
    "theme.config.yml",
    "theme.config.json",
)

# Entry point group scanned for installed plugins
PLUGIN_ENTRY_POINT_GROUP = "theme_config.plugins"

# Top-level keys of the record layout
RESERVED_KEYS: frozenset[str] = frozenset(
    {"contentPatterns", "themeExtensions", "themeOverrides", "plugins"}
)

# Top-level keys of the generator-native layout (content / theme.extend)
NATIVE_KEYS: frozenset[str] = frozenset({"content", "theme", "plugins"})

# Token categories that may appear at the top level of a config document.
# Placement there means "replace the default category".
KNOWN_TOKEN_CATEGORIES: frozenset[str] = frozenset(
    {
        "colors",
        "fontFamily",
        "fontSize",
        "fontWeight",
        "spacing",
        "screens",
        "borderRadius",
        "boxShadow",
        "zIndex",
    }
)


class DiagnosticCode(str, Enum):
    """Codes attached to non-fatal diagnostics."""

    NO_MATCH = "NO_MATCH"
    CATEGORY_OVERRIDDEN = "CATEGORY_OVERRIDDEN"


class ErrorMessages:
    """Standardized error messages."""

    CONFIG_NOT_FOUND = "Config file '{path}' not found."
    INVALID_SYNTAX = "Config file '{path}' is not valid YAML/JSON: {detail}"
    UNREADABLE = "Config file '{path}' could not be decoded: {detail}"
    NOT_A_MAPPING = "Config document must be a mapping, got {kind}."
    MIXED_LAYOUT = "Config mixes record keys ({record}) with generator keys ({native})."
    UNKNOWN_KEY = "Unsupported top-level key '{key}'."
    SCHEMA_VIOLATION = "Invalid config at '{field}': {detail}"
    PLUGIN_NOT_FOUND = "Plugin '{identifier}' could not be resolved."
    PLUGIN_LOAD_FAILED = "Plugin '{identifier}' failed to load: {detail}"
    NO_MATCH = "Content pattern '{pattern}' matched no files."
    CATEGORY_OVERRIDDEN = (
        "Category '{category}' is declared at the top level and replaces the default "
        "set; nest it under themeExtensions to merge instead."
    )
