"""Diagnostic records and per-document lint results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from markup_dom import AttributeToken, Node


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class LintStatus(str, Enum):
    """Overall outcome of linting one or more documents."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass
class Diagnostic:
    """A single violation reported by a rule."""
    rule: str
    severity: Severity
    message: str
    line: int
    col: int
    raw: str
    scope: Node | AttributeToken | None = None
    file_path: str | None = None

    def __str__(self) -> str:
        location = f"{self.file_path}:" if self.file_path else ""
        return f"{location}{self.line}:{self.col} [{self.severity.value}] {self.rule}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "col": self.col,
            "raw": self.raw,
            "file": self.file_path,
        }


@dataclass
class LintResult:
    """Diagnostics and counters for a lint run."""
    status: LintStatus = LintStatus.PASS
    diagnostics: list[Diagnostic] = field(default_factory=list)
    counters: dict[str, int] = field(default_factory=dict)
    file_path: Path | None = None

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = pass/warn, 1 = fail."""
        return 0 if self.status != LintStatus.FAIL else 1

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic and update the overall status (fail > warn > pass)."""
        self.diagnostics.append(diagnostic)
        if diagnostic.severity == Severity.ERROR:
            self.status = LintStatus.FAIL
        elif diagnostic.severity == Severity.WARNING and self.status == LintStatus.PASS:
            self.status = LintStatus.WARN
        self.increment_counter(diagnostic.rule)

    def increment_counter(self, name: str, value: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def merge(self, other: "LintResult") -> None:
        """Fold another result into this one."""
        for diagnostic in other.diagnostics:
            self.add_diagnostic(diagnostic)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "status": self.status.value,
            "exit_code": self.exit_code,
            "file": str(self.file_path) if self.file_path else None,
            "counters": self.counters,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
