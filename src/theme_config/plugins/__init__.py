"""
Plugins - extensions the generator loads alongside the resolved theme.
"""

from theme_config.plugins.registry import PluginRegistry, default_registry, validate_plugins

__all__ = [
    "PluginRegistry",
    "default_registry",
    "validate_plugins",
]
