"""Non-fatal diagnostics reported alongside a successful resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from theme_config.constants import DiagnosticCode, ErrorMessages
from theme_config.errors import NoMatchWarning


class DiagnosticSeverity(str, Enum):
    """Severity of a diagnostic."""

    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic."""

    severity: DiagnosticSeverity
    code: DiagnosticCode
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code.value}: {self.message}{location}"

    @classmethod
    def from_no_match(cls, warning: NoMatchWarning) -> Diagnostic:
        return cls(
            severity=DiagnosticSeverity.WARNING,
            code=DiagnosticCode.NO_MATCH,
            message=str(warning),
            location=f"contentPatterns:{warning.pattern}",
        )

    @classmethod
    def from_override(cls, category: str) -> Diagnostic:
        return cls(
            severity=DiagnosticSeverity.WARNING,
            code=DiagnosticCode.CATEGORY_OVERRIDDEN,
            message=ErrorMessages.CATEGORY_OVERRIDDEN.format(category=category),
            location=category,
        )
