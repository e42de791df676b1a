"""Collects diagnostics reported by one rule during one document pass."""

import logging

from markup_dom import AttributeToken, Node

from ..i18n import capitalize
from .models import Diagnostic, Severity

logger = logging.getLogger(__name__)


class DiagnosticCollector:
    """Turns `report(...)` calls into Diagnostic records.

    The scope supplies line, column and raw text unless they are given
    explicitly. Reporting never raises; a report that cannot be turned into
    a diagnostic is logged and dropped.
    """

    def __init__(self, rule: str, severity: Severity, file_path: str | None = None):
        self.rule = rule
        self.severity = severity
        self.file_path = file_path
        self.diagnostics: list[Diagnostic] = []

    def report(self, scope: Node | AttributeToken | None, message: str,
               line: int | None = None, col: int | None = None, raw: str | None = None) -> None:
        try:
            self.diagnostics.append(Diagnostic(
                rule=self.rule,
                severity=self.severity,
                message=capitalize(str(message)),
                line=line if line is not None else getattr(scope, "start_line", 1),
                col=col if col is not None else getattr(scope, "start_col", 1),
                raw=raw if raw is not None else getattr(scope, "raw", ""),
                scope=scope,
                file_path=self.file_path,
            ))
        except Exception as e:
            logger.warning(f"Dropped report from rule {self.rule}: {e}")

    __call__ = report
