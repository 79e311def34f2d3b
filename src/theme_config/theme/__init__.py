"""
Theme resolution - defaults extended by a record's token declarations.
"""

from theme_config.theme.merge import merge_category, merge_token_sets, replace_categories
from theme_config.theme.resolver import ThemeResolver, resolve_theme

__all__ = [
    "ThemeResolver",
    "merge_category",
    "merge_token_sets",
    "replace_categories",
    "resolve_theme",
]
