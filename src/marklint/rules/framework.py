"""Rule contract and the framework that runs rules against documents.

A rule is a LintRule subclass with a name, defaults and an async `verify`.
`create_rule` resolves its settings once and produces a RunnableRule;
LintFramework assembles runnable rules from configuration and aggregates
their diagnostics into a LintResult.
"""

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, ClassVar

import jsonschema

from markup_dom import Document, MarkupParser, ParseError

from ..config import MarklintConfig, RuleConfig
from ..diagnostics import Diagnostic, DiagnosticCollector, LintResult, Severity
from ..exceptions import RuleConfigError
from ..i18n import Translator, capitalize, get_translator
from ..spec import SpecTable

logger = logging.getLogger(__name__)

ReportFn = Callable[..., None]

CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


@dataclass(frozen=True)
class RuleSettings:
    """Resolved settings a rule runs with."""
    severity: Severity
    value: Any
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleContext:
    """What a rule sees during `verify`. Valid only for the duration of the call."""
    document: Document
    report: ReportFn
    t: Translator
    settings: RuleSettings
    specs: SpecTable


class LintRule(ABC):
    """Base class for lint rules."""

    default_severity: ClassVar[Severity] = Severity.ERROR
    default_value: ClassVar[Any] = True
    default_options: ClassVar[dict[str, Any]] = {}
    value_schema: ClassVar[dict[str, Any] | None] = None
    options_schema: ClassVar[dict[str, Any] | None] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name for identification."""
        pass

    @property
    def description(self) -> str:
        """First line of the rule docstring."""
        return (self.__doc__ or "").strip().split("\n")[0]

    @abstractmethod
    async def verify(self, context: RuleContext) -> None:
        """Check one document, calling `context.report` for each violation.

        Args:
            context: Document, reporter, translator and resolved settings
        """
        pass


@dataclass(frozen=True)
class RunnableRule:
    """A rule bound to its resolved settings."""
    rule: LintRule
    settings: RuleSettings
    specs: SpecTable
    enabled: bool = True

    @property
    def name(self) -> str:
        return self.rule.name

    async def run(self, document: Document, t: Translator) -> list[Diagnostic]:
        """Verify one document and return what the rule reported."""
        collector = DiagnosticCollector(self.name, self.settings.severity, document.file_path)
        context = RuleContext(
            document=document,
            report=collector.report,
            t=t,
            settings=self.settings,
            specs=self.specs,
        )
        await self.rule.verify(context)
        return collector.diagnostics


def _option_key(key: str) -> str:
    """extendsExposableElements -> extends_exposable_elements"""
    return CAMEL_BOUNDARY.sub("_", key).lower()


def _validate(rule: LintRule, schema: dict[str, Any] | None, instance: Any, what: str) -> None:
    if schema is None:
        return
    try:
        jsonschema.validate(instance=instance, schema=schema)
    except jsonschema.ValidationError as e:
        raise RuleConfigError(rule.name, f"{what}: {e.message}") from e


def create_rule(rule: LintRule, config: RuleConfig | None = None,
                specs: SpecTable | None = None) -> RunnableRule:
    """Resolve a rule's settings and bind them to it.

    Args:
        rule: Rule to run
        config: User settings, merged over the rule's defaults
        specs: Specification table, the built-in one if None

    Returns:
        RunnableRule

    Raises:
        RuleConfigError: If the value or options do not match the rule's schema
    """
    config = config or RuleConfig()
    value = config.value if config.has_value else rule.default_value
    options = {**rule.default_options, **{_option_key(k): v for k, v in config.options.items()}}

    _validate(rule, rule.value_schema, value, "value")
    _validate(rule, rule.options_schema, options, "options")

    settings = RuleSettings(
        severity=config.severity or rule.default_severity,
        value=value,
        options=options,
    )
    return RunnableRule(
        rule=rule,
        settings=settings,
        specs=specs or SpecTable.default(),
        enabled=config.enabled and value is not False,
    )


class LintFramework:
    """Runs a set of rules against documents."""

    def __init__(self, config: MarklintConfig | None = None, specs: SpecTable | None = None):
        self.config = config or MarklintConfig()
        self.specs = specs or self._load_specs()
        self.t = get_translator(self.config.locale)
        self.rules: list[RunnableRule] = []

    def _load_specs(self) -> SpecTable:
        table = SpecTable.default()
        for path in self.config.specs:
            logger.debug(f"Merging specification table from {path}")
            table = table.merged_with(SpecTable.from_json_file(Path(path)))
        return table

    def add_rule(self, rule: RunnableRule) -> None:
        """Add a runnable rule. Disabled rules are skipped."""
        if not rule.enabled:
            logger.debug(f"Rule {rule.name} is disabled")
            return
        self.rules.append(rule)

    def create_default_rules(self) -> None:
        """Create every built-in rule with the configured settings.

        Raises:
            RuleConfigError: If a rule's settings are invalid
        """
        from . import BUILTIN_RULES

        for name, rule_class in BUILTIN_RULES.items():
            self.add_rule(create_rule(rule_class(), self.config.rule(name), self.specs))

        unknown = set(self.config.rules) - set(BUILTIN_RULES)
        for name in sorted(unknown):
            logger.warning(f"Unknown rule in configuration: {name}")

    async def lint(self, document: Document) -> LintResult:
        """Run every rule on a document.

        A rule that raises is recorded as a single error for that rule; the
        remaining rules still run.

        Returns:
            LintResult with status, diagnostics, and counters
        """
        result = LintResult(file_path=Path(document.file_path))

        logger.info(f"Linting {document.file_path} with {len(self.rules)} rules")

        for rule in self.rules:
            logger.debug(f"Executing rule: {rule.name}")
            try:
                diagnostics = await rule.run(document, self.t)
            except Exception as e:
                logger.error(f"Rule {rule.name} failed with error: {e}")
                result.add_diagnostic(Diagnostic(
                    rule=rule.name,
                    severity=Severity.ERROR,
                    message=capitalize(self.t('rule execution failed: {0*}', str(e))),
                    line=1,
                    col=1,
                    raw="",
                    file_path=document.file_path,
                ))
                continue
            for diagnostic in diagnostics:
                result.add_diagnostic(diagnostic)

        logger.info(f"Found {len(result.diagnostics)} diagnostics in {document.file_path}")
        return result

    def lint_sync(self, document: Document) -> LintResult:
        return asyncio.run(self.lint(document))

    def lint_content(self, content: str, file_path: str = "<string>") -> LintResult:
        """Parse and lint markup source.

        Raises:
            ParseError: If the content cannot be parsed
        """
        parser = MarkupParser(self.config.parser.to_parser_config())
        document = parser.parse_document(content, file_path)
        return self.lint_sync(document)

    def lint_file(self, path: Path) -> LintResult:
        """Parse and lint a file.

        Raises:
            ParseError: If the file cannot be read or parsed
        """
        parser = MarkupParser(self.config.parser.to_parser_config())
        parsed = parser.parse_file(path)
        if not parsed.success or parsed.document is None:
            raise ParseError("; ".join(parsed.errors) or f"Failed to parse {path}")
        for warning in parsed.warnings:
            logger.warning(f"{path}: {warning}")
        return self.lint_sync(parsed.document)
