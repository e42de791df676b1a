"""Markup document tree for lint rules.

This package parses HTML-like markup into a tree of nodes with attribute
tokens and source positions, and exposes the traversal API rules consume.

Basic usage:
    from markup_dom import MarkupParser

    parser = MarkupParser()
    result = parser.parse_content('<div class="a b"></div>')

    if result.success:
        for element in result.document.iter_nodes("Element"):
            print(element.name, element.get_attribute("class"))
"""

from .constants import (
    DEFAULT_CONFIG,
    DYNAMIC_VALUE_PATTERNS,
    STANDARD_NAMESPACES,
    VOID_ELEMENTS,
)
from .models import (
    AttributeToken,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    NodeType,
    ParseDiagnostics,
    ParseResult,
    Text,
    ValueNode,
)
from .parser import MarkupParser, ParseError
from .utils import PositionUtils, TemplateUtils, TextUtils

__version__ = "0.1.0"

# Public API
__all__ = [
    # Main parser
    'MarkupParser',
    'ParseError',
    'parse_markup',

    # Tree
    'Document',
    'Node',
    'NodeType',
    'Element',
    'Text',
    'Comment',
    'Doctype',
    'AttributeToken',
    'ValueNode',
    'ParseResult',
    'ParseDiagnostics',

    # Utilities
    'TextUtils',
    'PositionUtils',
    'TemplateUtils',

    # Constants
    'DEFAULT_CONFIG',
    'DYNAMIC_VALUE_PATTERNS',
    'STANDARD_NAMESPACES',
    'VOID_ELEMENTS',
]


def parse_markup(content, config=None, syntax=None):
    """Convenience function to parse markup into a Document.

    Args:
        content: Markup as string
        config: Optional parser configuration
        syntax: Optional 'html' or 'xml'

    Returns:
        Parsed Document

    Raises:
        ParseError: If the content cannot be parsed
    """
    return MarkupParser(config).parse_document(content, syntax=syntax)
