"""Error taxonomy for config loading and resolution."""

from __future__ import annotations

from typing import Any

from theme_config.constants import ErrorMessages


class ThemeConfigError(Exception):
    """Base class for all resolver errors."""


class ConfigNotFoundError(ThemeConfigError, FileNotFoundError):
    """Raised when the config source does not exist."""

    def __init__(self, path: Any):
        self.path = path
        super().__init__(ErrorMessages.CONFIG_NOT_FOUND.format(path=path))


class MalformedConfigError(ThemeConfigError):
    """Raised when the config source is not syntactically valid."""

    def __init__(self, message: str, path: Any = None):
        self.path = path
        super().__init__(message)


class SchemaViolationError(ThemeConfigError):
    """
    Raised when the config document has the wrong shape.

    Attributes:
        field_path: Dotted path of the first offending field
        errors: Individual error dicts (pydantic format) when available
    """

    def __init__(
        self,
        field_path: str,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        self.field_path = field_path
        self.detail = detail
        self.errors = errors or []
        super().__init__(ErrorMessages.SCHEMA_VIOLATION.format(field=field_path, detail=detail))


class PluginResolutionError(ThemeConfigError):
    """Raised when a plugin identifier cannot be resolved to a loadable extension."""

    def __init__(self, identifier: str, detail: str | None = None):
        self.identifier = identifier
        if detail:
            message = ErrorMessages.PLUGIN_LOAD_FAILED.format(identifier=identifier, detail=detail)
        else:
            message = ErrorMessages.PLUGIN_NOT_FOUND.format(identifier=identifier)
        super().__init__(message)


class NoMatchWarning(UserWarning):
    """
    A content pattern matched zero files.

    Non-fatal: collected alongside a successful result, never raised by
    resolution.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(ErrorMessages.NO_MATCH.format(pattern=pattern))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoMatchWarning) and other.pattern == self.pattern

    def __hash__(self) -> int:
        return hash((NoMatchWarning, self.pattern))
