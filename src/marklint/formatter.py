"""Rich console formatting for lint results."""

import json

from rich import box
from rich.console import Console
from rich.table import Table

from .diagnostics import LintResult, LintStatus, Severity

SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
}

STATUS_COLORS = {
    LintStatus.PASS: "green",
    LintStatus.WARN: "yellow",
    LintStatus.FAIL: "red",
}


class ReportFormatter:
    """Formats lint results for console display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def format_table(self, results: list[LintResult]) -> None:
        """Print one diagnostics table per file, then a summary."""
        for result in results:
            if not result.diagnostics:
                continue
            self._format_file(result)

        self._format_summary(results)

    def _format_file(self, result: LintResult) -> None:
        table = Table(title=str(result.file_path), box=box.ROUNDED, title_justify="left")
        table.add_column("Location", style="dim", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Rule", style="cyan", no_wrap=True)
        table.add_column("Message", style="white")

        for diagnostic in result.diagnostics:
            color = SEVERITY_COLORS.get(diagnostic.severity, "white")
            table.add_row(
                f"{diagnostic.line}:{diagnostic.col}",
                f"[{color}]{diagnostic.severity.value.upper()}[/{color}]",
                diagnostic.rule,
                diagnostic.message,
            )

        self.console.print(table)
        self.console.print()

    def _format_summary(self, results: list[LintResult]) -> None:
        total = LintResult()
        for result in results:
            total.merge(result)

        if not total.diagnostics:
            self.console.print(f"[green]No problems found in {len(results)} file(s)[/green]")
            return

        color = STATUS_COLORS[total.status]
        self.console.print(
            f"[{color}]{len(total.diagnostics)} problem(s)[/{color}] "
            f"({total.error_count} errors, {total.warning_count} warnings) "
            f"in {len(results)} file(s)"
        )

        counter_table = Table(box=box.SIMPLE)
        counter_table.add_column("Rule", style="cyan")
        counter_table.add_column("Count", style="white", justify="right")
        for rule, count in sorted(total.counters.items()):
            counter_table.add_row(rule, str(count))
        self.console.print(counter_table)

    def format_markdown(self, results: list[LintResult]) -> str:
        """Render results as a Markdown report."""
        lines = ["# Lint Report", ""]
        for result in results:
            lines.append(f"## {result.file_path}")
            lines.append("")
            lines.append(f"**Status:** {result.status.value}")
            lines.append("")
            if not result.diagnostics:
                lines.append("No problems found.")
                lines.append("")
                continue
            for diagnostic in result.diagnostics:
                lines.append(
                    f"- **{diagnostic.severity.value.upper()}** `{diagnostic.rule}` "
                    f"({diagnostic.line}:{diagnostic.col}): {diagnostic.message}"
                )
            lines.append("")
        return "\n".join(lines)

    @staticmethod
    def format_json(results: list[LintResult]) -> str:
        """Render results as JSON."""
        return json.dumps(
            {
                "exit_code": max((r.exit_code for r in results), default=0),
                "results": [r.to_dict() for r in results],
            },
            indent=2,
            ensure_ascii=False,
        )
