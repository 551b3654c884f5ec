"""Diagnostic model: structured findings from the validation pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a class string.

    Attributes:
        rule: Identifier of the check (the error kind for class errors).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        class_name: The class string involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    class_name: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [class={self.class_name}]" if self.class_name else ""
        text = f"{self.severity.value}{location}: {self.message}"
        if self.fix:
            text = f"{text} ({self.fix})"
        return text
