"""
Pydantic models for the theme configuration resolver.

This module provides:
- ConfigurationRecord: Validated authored config
- ResolvedTheme: Token set after merging over defaults
- Diagnostic: Non-fatal issue reported with a result
"""

from theme_config.models.config import (
    ConfigurationRecord,
    PluginHandle,
    TokenCategory,
    TokenSet,
    TokenValue,
)
from theme_config.models.diagnostics import Diagnostic, DiagnosticSeverity
from theme_config.models.theme import ResolvedTheme

__all__ = [
    "ConfigurationRecord",
    "Diagnostic",
    "DiagnosticSeverity",
    "PluginHandle",
    "ResolvedTheme",
    "TokenCategory",
    "TokenSet",
    "TokenValue",
]
