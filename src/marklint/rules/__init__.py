"""Lint rules and the framework that runs them."""

from .class_naming import ClassNamingRule
from .framework import (
    LintFramework,
    LintRule,
    RuleContext,
    RuleSettings,
    RunnableRule,
    create_rule,
)
from .invalid_attr import InvalidAttrRule
from .no_empty_palpable_content import NoEmptyPalpableContentRule

BUILTIN_RULES: dict[str, type[LintRule]] = {
    "invalid-attr": InvalidAttrRule,
    "class-naming": ClassNamingRule,
    "no-empty-palpable-content": NoEmptyPalpableContentRule,
}

__all__ = [
    "BUILTIN_RULES",
    "ClassNamingRule",
    "InvalidAttrRule",
    "LintFramework",
    "LintRule",
    "NoEmptyPalpableContentRule",
    "RuleContext",
    "RuleSettings",
    "RunnableRule",
    "create_rule",
]
