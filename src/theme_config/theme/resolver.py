"""
Theme resolver - merges a record's token declarations over defaults.

Resolution order per build:
1. Start from the defaults (never mutated).
2. Replace each category named in ``theme_overrides`` wholesale.
3. Deep-merge ``theme_extensions`` key by key.

Both steps depend only on the record, so re-resolving a resolved theme with
the same record is a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from theme_config.constants import ErrorMessages
from theme_config.defaults import DEFAULT_THEME
from theme_config.models.config import ConfigurationRecord
from theme_config.models.diagnostics import Diagnostic
from theme_config.models.theme import ResolvedTheme
from theme_config.theme.merge import changed_keys, merge_token_sets, replace_categories

logger = logging.getLogger(__name__)


class ThemeResolver:
    """
    Resolves configuration records into complete token sets.

    The resolver holds only its defaults; it keeps no state between calls.
    """

    def __init__(self, defaults: ResolvedTheme | Mapping[str, Mapping[str, Any]] = DEFAULT_THEME):
        """
        Initialize the resolver with a default token set.

        Args:
            defaults: Built-in tokens the record extends
        """
        self.defaults = _as_theme(defaults)

    def resolve(self, record: ConfigurationRecord) -> ResolvedTheme:
        """
        Merge a record's token declarations over the defaults.

        Args:
            record: Validated configuration record

        Returns:
            The resolved theme
        """
        base = self.defaults.categories
        overridden = record.overridden_categories

        for category in overridden:
            logger.warning(ErrorMessages.CATEGORY_OVERRIDDEN.format(category=category))
        tokens = replace_categories(base, record.theme_overrides)
        tokens = merge_token_sets(tokens, record.theme_extensions)

        if logger.isEnabledFor(logging.DEBUG):
            for category, keys in changed_keys(base, tokens, record.theme_extensions).items():
                logger.debug(f"Extended '{category}': {', '.join(keys)}")

        return ResolvedTheme(categories=tokens, overridden=overridden)

    def diagnostics(self, record: ConfigurationRecord) -> list[Diagnostic]:
        """
        Report declarations whose placement changes merge semantics.

        Args:
            record: Validated configuration record

        Returns:
            One diagnostic per overridden category
        """
        return [Diagnostic.from_override(category) for category in record.overridden_categories]


def resolve_theme(
    record: ConfigurationRecord,
    defaults: ResolvedTheme | Mapping[str, Mapping[str, Any]] = DEFAULT_THEME,
) -> ResolvedTheme:
    """Merge ``record``'s token declarations over ``defaults``."""
    return ThemeResolver(defaults).resolve(record)


def _as_theme(defaults: ResolvedTheme | Mapping[str, Mapping[str, Any]]) -> ResolvedTheme:
    if isinstance(defaults, ResolvedTheme):
        return defaults
    return ResolvedTheme.from_mapping(defaults)
