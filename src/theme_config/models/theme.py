"""
Resolved theme - the token set handed to the CSS generator.

A resolved theme is derived data: it is recomputed on every build and
never persisted. Its categories are read-only views, so a shared theme such
as the built-in defaults cannot be edited in place.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_serializer, field_validator

from theme_config.models.config import TokenCategory, TokenSet


class ResolvedTheme(BaseModel):
    """
    A complete token set, category by category.

    Also used for the built-in defaults, so a resolved theme can be fed back
    in as the defaults of another resolution. Themes are hashable.
    """

    categories: TokenSet = Field(
        default_factory=dict,
        description="Token category -> token name -> value",
    )
    overridden: tuple[str, ...] = Field(
        default=(),
        description="Categories replaced wholesale instead of merged",
    )

    model_config = {"frozen": True}

    @field_validator("categories")
    @classmethod
    def _freeze_categories(cls, v: TokenSet) -> Mapping[str, Mapping[str, Any]]:
        """Wrap every level in a read-only view (token values are already tuples)."""
        return MappingProxyType({category: MappingProxyType(dict(tokens)) for category, tokens in v.items()})

    @field_serializer("categories")
    def _serialize_categories(self, categories: Mapping[str, Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
        return {category: dict(tokens) for category, tokens in categories.items()}

    def __hash__(self) -> int:
        return hash(
            (
                frozenset(
                    (category, frozenset(tokens.items())) for category, tokens in self.categories.items()
                ),
                self.overridden,
            )
        )

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Mapping[str, Any]],
        overridden: tuple[str, ...] = (),
    ) -> ResolvedTheme:
        """Build a theme from plain category mappings."""
        return cls.model_validate(
            {
                "categories": {category: dict(tokens) for category, tokens in data.items()},
                "overridden": overridden,
            }
        )

    def get_category(self, category: str) -> TokenCategory:
        """Get a mutable copy of the tokens in a category (empty if absent)."""
        return dict(self.categories.get(category, {}))

    def get_token(self, category: str, name: str) -> str | tuple[str, ...] | None:
        """Look up a single token value."""
        return self.categories.get(category, {}).get(name)

    def __contains__(self, category: object) -> bool:
        return category in self.categories

    def to_yaml_dict(self) -> dict[str, dict[str, Any]]:
        """Convert to a YAML-serializable dictionary of categories."""
        return {
            category: {
                name: list(value) if isinstance(value, tuple) else value
                for name, value in tokens.items()
            }
            for category, tokens in self.categories.items()
        }

    def to_yaml(self) -> str:
        """Serialize the categories as a YAML document."""
        return yaml.safe_dump(self.to_yaml_dict(), sort_keys=False, allow_unicode=True)
