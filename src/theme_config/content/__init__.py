"""
Content resolution - which source files the generator scans for class names.
"""

from theme_config.content.globbing import expand_braces
from theme_config.content.scanner import ResolvedContentSet, resolve_content_set

__all__ = [
    "ResolvedContentSet",
    "expand_braces",
    "resolve_content_set",
]
