"""Shared fixtures for marklint tests."""

import asyncio

import pytest

from marklint.config import RuleConfig
from marklint.i18n import get_translator
from marklint.rules import create_rule
from markup_dom import MarkupParser


@pytest.fixture
def parse():
    """Parse markup source into a Document."""
    def _parse(source: str, syntax: str = "html", file_path: str = "<string>"):
        return MarkupParser().parse_document(source, file_path=file_path, syntax=syntax)
    return _parse


@pytest.fixture
def t():
    """English translator."""
    return get_translator("en")


@pytest.fixture
def run_rule(parse, t):
    """Run one rule over markup and return its diagnostics."""
    def _run(rule, source: str, config: dict | None = None, syntax: str = "html", translator=None):
        document = parse(source, syntax)
        runnable = create_rule(rule, RuleConfig(**config) if config is not None else None)
        return asyncio.run(runnable.run(document, translator or t))
    return _run
