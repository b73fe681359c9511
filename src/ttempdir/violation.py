"""Violation data structure for checker results."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

RULE_TEMPDIR = "ttempdir"
RULE_READ_ERROR = "read_error"
RULE_SYNTAX_ERROR = "syntax_error"


class Severity(Enum):
    """Violation severity levels."""

    ERROR = "error"  # Fails the run
    WARNING = "warning"  # Reported, exit code unaffected


@dataclass
class Violation:
    """Represents a single checker violation."""

    rule: str  # Rule identifier (e.g., "ttempdir")
    severity: Severity
    message: str  # Human-readable message
    file_path: str
    line: int  # Line number (1-indexed)
    column: int = 0  # Column number (1-indexed, 0 = unknown)
    fix: Optional[str] = None  # Suggested fix

    def __str__(self) -> str:
        """Format violation for display."""
        loc = f"{self.file_path}:{self.line}"
        if self.column:
            loc += f":{self.column}"
        return f"{loc}: {self.message}"


@dataclass
class CheckResult:
    """Results from checking a single file."""

    file_path: str
    violations: list[Violation]

    @property
    def passed(self) -> bool:
        """Check if file has no ERROR violations."""
        return not any(v.severity == Severity.ERROR for v in self.violations)

    @property
    def error_count(self) -> int:
        """Count ERROR violations."""
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Count WARNING violations."""
        return sum(
            1 for v in self.violations if v.severity == Severity.WARNING
        )
