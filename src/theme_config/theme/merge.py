"""
Token set merging.

Categories are deep-merged key by key; token values themselves are atomic,
so a font stack is replaced as a whole rather than concatenated.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from theme_config.models.config import TokenSet, TokenValue


def merge_category(
    base: Mapping[str, TokenValue],
    extension: Mapping[str, TokenValue],
) -> dict[str, TokenValue]:
    """
    Merge one category's tokens over another's.

    Keys from ``base`` keep their position; new keys from ``extension`` are
    appended in extension order. No key is ever deleted.
    """
    merged = dict(base)
    merged.update(extension)
    return merged


def merge_token_sets(base: Mapping[str, Mapping[str, TokenValue]], *extensions: TokenSet) -> TokenSet:
    """
    Deep-merge token sets left to right.

    Categories missing from every extension pass through from ``base``
    unchanged. Inputs are never mutated.
    """
    merged: TokenSet = {category: dict(tokens) for category, tokens in base.items()}
    for extension in extensions:
        for category, tokens in extension.items():
            merged[category] = merge_category(merged.get(category, {}), tokens)
    return merged


def replace_categories(
    base: Mapping[str, Mapping[str, TokenValue]],
    overrides: TokenSet,
) -> TokenSet:
    """Replace whole categories of ``base`` with those in ``overrides``."""
    replaced: TokenSet = {category: dict(tokens) for category, tokens in base.items()}
    for category, tokens in overrides.items():
        replaced[category] = dict(tokens)
    return replaced


def changed_keys(
    base: Mapping[str, Mapping[str, TokenValue]],
    merged: Mapping[str, Mapping[str, TokenValue]],
    categories: Iterable[str],
) -> dict[str, list[str]]:
    """List the token names that differ between two token sets, per category."""
    changes: dict[str, list[str]] = {}
    for category in categories:
        before = base.get(category, {})
        after = merged.get(category, {})
        keys = [name for name, value in after.items() if before.get(name) != value]
        if keys:
            changes[category] = keys
    return changes
