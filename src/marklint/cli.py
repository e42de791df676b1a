"""CLI interface for marklint using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from markup_dom import ParseError

from marklint import __description__, __version__
from marklint.config import LogLevel, MarklintConfig, Syntax, load_config
from marklint.diagnostics import LintResult
from marklint.exceptions import MarklintError
from marklint.formatter import ReportFormatter
from marklint.rules import BUILTIN_RULES, LintFramework

MARKUP_SUFFIXES = (".html", ".htm", ".svg", ".xhtml")

LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

app = typer.Typer(
    name="marklint",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"marklint version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """marklint - Static analysis for HTML-like markup."""


def _setup_logging(config: MarklintConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else LOG_LEVELS.get(config.logging.level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _collect_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the markup files they contain."""
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(
                p for p in path.rglob("*")
                if p.is_file() and p.suffix.lower() in MARKUP_SUFFIXES
            ))
        elif path.exists():
            files.append(path)
        else:
            raise FileNotFoundError(f"Path not found: {path}")
    return files


@app.command()
def lint(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Markup files or directories to lint")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: table)")
    ] = "table",
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .marklintrc.json)")
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Message locale: en, ja")
    ] = None,
    syntax: Annotated[
        Optional[str],
        typer.Option("--syntax", "-s", help="Force markup syntax: html, xml")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Lint markup files against the configured rules."""
    valid_formats = ["table", "json", "markdown"]
    valid_syntaxes = [Syntax.HTML.value, Syntax.XML.value]

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    if syntax is not None and syntax not in valid_syntaxes:
        console.print(f"[red]Error:[/red] Invalid syntax '{syntax}'. Must be one of: {', '.join(valid_syntaxes)}")
        raise typer.Exit(1)

    try:
        marklint_config = load_config(config)
        if locale is not None or syntax is not None:
            overrides = marklint_config.model_dump(exclude_unset=True)
            if locale is not None:
                overrides["locale"] = locale
            if syntax is not None:
                overrides.setdefault("parser", {})["syntax"] = syntax
            marklint_config = MarklintConfig.model_validate(overrides)

        _setup_logging(marklint_config, verbose)

        framework = LintFramework(marklint_config)
        framework.create_default_rules()

        files = _collect_files(paths)
        if not files:
            console.print("[yellow]No markup files found[/yellow]")
            raise typer.Exit(0)

        results: list[LintResult] = []
        for file_path in files:
            try:
                results.append(framework.lint_file(file_path))
            except ParseError as e:
                console.print(f"[red]Error:[/red] Failed to parse {file_path}: {e}")
                raise typer.Exit(1)

        formatter = ReportFormatter(console)
        if format == "json":
            print(formatter.format_json(results))
        elif format == "markdown":
            print(formatter.format_markdown(results))
        else:
            formatter.format_table(results)

        exit_code = max((result.exit_code for result in results), default=0)
        raise typer.Exit(exit_code)

    except (MarklintError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("rules")
def list_rules() -> None:
    """List the built-in rules and their defaults."""
    table = Table(title="Built-in Rules")
    table.add_column("Rule", style="bold cyan")
    table.add_column("Severity", style="white")
    table.add_column("Default Value", style="white")
    table.add_column("Description", style="dim")

    for name, rule_class in BUILTIN_RULES.items():
        rule = rule_class()
        table.add_row(
            name,
            rule.default_severity.value,
            repr(rule.default_value),
            rule.description,
        )

    console.print(table)


if __name__ == "__main__":
    app()
