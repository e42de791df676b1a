"""Diagnostic reporting."""

from .collector import DiagnosticCollector
from .models import Diagnostic, LintResult, LintStatus, Severity

__all__ = ["Diagnostic", "DiagnosticCollector", "LintResult", "LintStatus", "Severity"]
