"""
Configuration record - the authored input to a build.

The record is validated eagerly: shape ambiguity in the source document
becomes a SchemaViolationError at load time instead of a failure later in
the build.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainValidator, StringConstraints, model_validator

from theme_config.constants import (
    KNOWN_TOKEN_CATEGORIES,
    NATIVE_KEYS,
    RESERVED_KEYS,
    ErrorMessages,
)
from theme_config.errors import SchemaViolationError


def _coerce_token_value(value: Any) -> str | tuple[str, ...]:
    """Accept a string or a sequence of strings (font stacks keep their order)."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValueError(f"token value must be a string or a list of strings, got {type(value).__name__}")


def _check_plugin_handle(value: Any) -> str | Callable[..., Any]:
    """Accept a non-empty identifier string or an already-loaded callable."""
    if isinstance(value, str):
        if not value.strip():
            raise ValueError("plugin identifier must be a non-empty string")
        return value.strip()
    if callable(value):
        return value
    raise ValueError(f"plugin must be an identifier string or a callable, got {type(value).__name__}")


TokenValue = Annotated[str | tuple[str, ...], PlainValidator(_coerce_token_value)]
TokenName = Annotated[str, StringConstraints(min_length=1)]
TokenCategory = dict[TokenName, TokenValue]
TokenSet = dict[TokenName, TokenCategory]

ContentPattern = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
PluginHandle = Annotated[str | Callable[..., Any], PlainValidator(_check_plugin_handle)]

_FIELD_NAMES = {"content_patterns", "theme_extensions", "theme_overrides"}

# Record fields and where the generator-native layout declares them
NATIVE_FIELD_PATHS: dict[str, tuple[str, ...]] = {
    "contentPatterns": ("content",),
    "themeExtensions": ("theme", "extend"),
    "themeOverrides": ("theme",),
}


class ConfigurationRecord(BaseModel):
    """
    A validated configuration record.

    Token categories listed in ``theme_extensions`` are deep-merged over the
    defaults; categories in ``theme_overrides`` replace them.
    """

    content_patterns: tuple[ContentPattern, ...] = Field(
        ...,
        alias="contentPatterns",
        min_length=1,
        description="Glob patterns of files to scan for class names",
    )
    theme_extensions: TokenSet = Field(
        default_factory=dict,
        alias="themeExtensions",
        description="Per-category tokens merged over the defaults",
    )
    theme_overrides: TokenSet = Field(
        default_factory=dict,
        alias="themeOverrides",
        description="Per-category tokens replacing the defaults",
    )
    plugins: tuple[PluginHandle, ...] = Field(
        default=(),
        description="Plugin identifiers or handles, in load order",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    @model_validator(mode="before")
    @classmethod
    def _normalize_layout(cls, data: Any) -> Any:
        """Fold the generator-native layout and top-level categories into record fields."""
        if not isinstance(data, Mapping):
            return data

        keys = set(data)
        native = sorted(keys & (NATIVE_KEYS - {"plugins"}))
        record = sorted(keys & (RESERVED_KEYS | _FIELD_NAMES) - {"plugins"})
        if native and record:
            raise SchemaViolationError(
                native[0],
                ErrorMessages.MIXED_LAYOUT.format(record=", ".join(record), native=", ".join(native)),
            )
        if native:
            return _from_native_layout(data)

        categories = sorted(keys & KNOWN_TOKEN_CATEGORIES)
        if not categories:
            return data

        normalized = {key: value for key, value in data.items() if key not in categories}
        overrides_key = "theme_overrides" if "theme_overrides" in data else "themeOverrides"
        overrides = normalized.get(overrides_key, {})
        if not isinstance(overrides, Mapping):
            # Let field validation report the bad type
            return normalized
        overrides = dict(overrides)
        for category in categories:
            if category in overrides:
                raise SchemaViolationError(
                    category,
                    f"category declared both at the top level and under {overrides_key}",
                )
            overrides[category] = data[category]
        normalized[overrides_key] = overrides
        return normalized

    @property
    def overridden_categories(self) -> tuple[str, ...]:
        """Categories whose defaults are replaced rather than extended."""
        return tuple(sorted(self.theme_overrides))

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-serializable dictionary (record layout)."""
        data: dict[str, Any] = {
            "contentPatterns": list(self.content_patterns),
            "themeExtensions": _token_set_to_plain(self.theme_extensions),
            "plugins": [p if isinstance(p, str) else _handle_name(p) for p in self.plugins],
        }
        if self.theme_overrides:
            data["themeOverrides"] = _token_set_to_plain(self.theme_overrides)
        return data


def is_native_layout(data: Mapping[str, Any]) -> bool:
    """Whether a document uses the generator-native ``content`` / ``theme`` keys."""
    return bool(set(data) & (NATIVE_KEYS - {"plugins"}))


def _from_native_layout(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map ``content`` / ``theme.extend`` / ``theme.<category>`` onto record fields."""
    unknown = sorted(str(key) for key in data if key not in NATIVE_KEYS)
    if unknown:
        raise SchemaViolationError(unknown[0], ErrorMessages.UNKNOWN_KEY.format(key=unknown[0]))

    normalized: dict[str, Any] = {}
    if "content" in data:
        normalized["contentPatterns"] = data["content"]
    if "plugins" in data:
        normalized["plugins"] = data["plugins"]

    theme = data.get("theme") or {}
    if not isinstance(theme, Mapping):
        raise SchemaViolationError("theme", f"must be a mapping, got {type(theme).__name__}")

    if "extend" in theme:
        normalized["themeExtensions"] = theme["extend"]
    overrides = {key: value for key, value in theme.items() if key != "extend"}
    if overrides:
        normalized["themeOverrides"] = overrides
    return normalized


def _token_set_to_plain(tokens: Mapping[str, Mapping[str, Any]]) -> dict[str, dict[str, Any]]:
    return {
        category: {
            name: list(value) if isinstance(value, tuple) else value
            for name, value in values.items()
        }
        for category, values in tokens.items()
    }


def _handle_name(handle: Callable[..., Any]) -> str:
    module = getattr(handle, "__module__", None)
    name = getattr(handle, "__qualname__", None) or getattr(handle, "__name__", repr(handle))
    return f"{module}:{name}" if module else name
