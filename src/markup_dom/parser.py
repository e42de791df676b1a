"""Core markup parser producing document trees with source positions.

HTML syntax is tokenized with the standard library HTMLParser; XML syntax
(SVG, XHTML) goes through defusedxml's hardened SAX parser.
"""

import html
import re
import time
from html.parser import HTMLParser
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler

from defusedxml import DefusedXmlException
from defusedxml.sax import parseString as defused_parse_string

from .constants import DEFAULT_CONFIG, STANDARD_NAMESPACES, VOID_ELEMENTS, XML_SUFFIXES
from .models import (
    AttributeToken,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    ParseDiagnostics,
    ParseResult,
    Text,
    ValueNode,
)
from .utils import PositionUtils, TemplateUtils

# name, optionally followed by ="double" | ='single' | unquoted
ATTRIBUTE_PATTERN = re.compile(
    r'''(?P<name>[^\s/>"'=]+)'''
    r'''(?:\s*=\s*(?P<value>"[^"]*"|'[^']*'|[^\s"'=<>`]+))?'''
)

_NAMESPACE_ALIASES: Dict[str, str] = {uri: alias for alias, uri in STANDARD_NAMESPACES.items()}


class ParseError(Exception):
    """Raised when a document cannot be turned into a tree."""

    def __init__(self, message: str, line: Optional[int] = None, col: Optional[int] = None):
        self.line = line
        self.col = col
        super().__init__(message)


def _append(document: Document, stack: List[Element], node: Node) -> None:
    """Attach a node to the innermost open element, merging adjacent text."""
    siblings = stack[-1].children if stack else document.children
    if isinstance(node, Text) and siblings and isinstance(siblings[-1], Text):
        siblings[-1].raw += node.raw
        return
    if stack:
        stack[-1].append_child(node)
    else:
        document.append_child(node)


class _HtmlTreeBuilder(HTMLParser):
    """Builds a Document from HTML syntax."""

    def __init__(self, document: Document, dynamic_patterns: List[Pattern[str]]):
        super().__init__(convert_charrefs=True)
        self.document = document
        self.dynamic_patterns = dynamic_patterns
        self.warnings: List[str] = []
        self._stack: List[Element] = []

    def handle_starttag(self, tag: str, attrs: List[Any]) -> None:
        self._open(tag, self_closing=False)

    def handle_startendtag(self, tag: str, attrs: List[Any]) -> None:
        self._open(tag, self_closing=True)

    def handle_endtag(self, tag: str) -> None:
        for index in range(len(self._stack) - 1, -1, -1):
            if self._stack[index].name == tag:
                del self._stack[index:]
                return
        line, offset = self.getpos()
        self.warnings.append(f"Stray end tag </{tag}> at {line}:{offset + 1}")

    def handle_data(self, data: str) -> None:
        line, offset = self.getpos()
        _append(self.document, self._stack, Text(raw=data, start_line=line, start_col=offset + 1))

    def handle_comment(self, data: str) -> None:
        line, offset = self.getpos()
        _append(self.document, self._stack, Comment(raw=f"<!--{data}-->", start_line=line, start_col=offset + 1))

    def handle_decl(self, decl: str) -> None:
        if decl.lower().startswith('doctype'):
            line, offset = self.getpos()
            _append(self.document, self._stack, Doctype(raw=f"<!{decl}>", start_line=line, start_col=offset + 1))

    def unknown_decl(self, data: str) -> None:
        # <![CDATA[...]]> inside foreign content
        if data.startswith('CDATA['):
            line, offset = self.getpos()
            _append(self.document, self._stack, Text(raw=data[6:], start_line=line, start_col=offset + 1))

    def _open(self, tag: str, self_closing: bool) -> None:
        line, offset = self.getpos()
        raw = self.get_starttag_text() or f"<{tag}>"
        parent = self._stack[-1] if self._stack else None
        element = Element(
            raw=raw,
            start_line=line,
            start_col=offset + 1,
            name=tag,
            namespace=self._namespace_for(tag, parent),
            self_closing=self_closing,
        )
        for attr in self._tokenize_attributes(raw, tag, line, offset + 1):
            element.add_attribute(attr)
        _append(self.document, self._stack, element)
        if not self_closing and tag not in VOID_ELEMENTS:
            self._stack.append(element)

    @staticmethod
    def _namespace_for(tag: str, parent: Optional[Element]) -> str:
        if tag == 'svg':
            return 'svg'
        if tag == 'math':
            return 'mathml'
        if parent is not None and parent.namespace != 'html' and parent.local_name != 'foreignobject':
            return parent.namespace
        return 'html'

    def _tokenize_attributes(self, raw: str, tag: str, line: int, col: int) -> List[AttributeToken]:
        """Re-scan the raw start tag to recover attribute spans."""
        start = 1 + len(tag)
        end = len(raw) - (2 if raw.endswith('/>') else 1)
        tokens = []
        for match in ATTRIBUTE_PATTERN.finditer(raw, start, max(start, end)):
            attr_line, attr_col = PositionUtils.advance(line, col, raw, match.start())
            quoted = match.group('value')
            value_node = None
            value = ""
            is_dynamic = False
            if quoted is not None:
                value_offset = match.start('value')
                inner = quoted
                if quoted[:1] in ('"', "'"):
                    inner = quoted[1:-1]
                    value_offset += 1
                value_line, value_col = PositionUtils.advance(line, col, raw, value_offset)
                value_node = ValueNode(raw=inner, start_line=value_line, start_col=value_col)
                value = html.unescape(inner)
                is_dynamic = TemplateUtils.is_dynamic(inner, self.dynamic_patterns)
            tokens.append(AttributeToken(
                name=match.group('name').lower(),
                value=value,
                raw=match.group(0),
                start_line=attr_line,
                start_col=attr_col,
                value_node=value_node,
                is_dynamic_value=is_dynamic,
            ))
        return tokens


class _XmlTreeBuilder(ContentHandler):
    """Builds a Document from XML syntax.

    SAX reports one position per start tag, so attribute tokens share the
    position of their element.
    """

    def __init__(self, document: Document, dynamic_patterns: List[Pattern[str]]):
        super().__init__()
        self.document = document
        self.dynamic_patterns = dynamic_patterns
        self._stack: List[Element] = []
        self._prefixes: List[Dict[str, str]] = [{}]
        self._locator = None

    def setDocumentLocator(self, locator) -> None:
        self._locator = locator

    def _position(self):
        if self._locator is None:
            return 1, 1
        return self._locator.getLineNumber(), self._locator.getColumnNumber() + 1

    def startElement(self, name: str, attrs) -> None:
        line, col = self._position()
        scope = dict(self._prefixes[-1])
        for attr_name in attrs.getNames():
            if attr_name == 'xmlns':
                scope[''] = attrs.getValue(attr_name)
            elif attr_name.startswith('xmlns:'):
                scope[attr_name[6:]] = attrs.getValue(attr_name)
        self._prefixes.append(scope)

        prefix = name.split(':')[0] if ':' in name else ''
        uri = scope.get(prefix)
        if uri is not None:
            namespace = _NAMESPACE_ALIASES.get(uri, uri)
        elif self._stack:
            namespace = self._stack[-1].namespace
        else:
            namespace = 'xml'

        raw_attrs = ''.join(f' {key}="{attrs.getValue(key)}"' for key in attrs.getNames())
        element = Element(
            raw=f"<{name}{raw_attrs}>",
            start_line=line,
            start_col=col,
            name=name,
            namespace=namespace,
        )
        for attr_name in attrs.getNames():
            value = attrs.getValue(attr_name)
            element.add_attribute(AttributeToken(
                name=attr_name,
                value=value,
                raw=f'{attr_name}="{value}"',
                start_line=line,
                start_col=col,
                value_node=ValueNode(raw=value, start_line=line, start_col=col),
                is_dynamic_value=TemplateUtils.is_dynamic(value, self.dynamic_patterns),
            ))
        _append(self.document, self._stack, element)
        self._stack.append(element)

    def endElement(self, name: str) -> None:
        element = self._stack.pop()
        self._prefixes.pop()
        if not element.children:
            element.self_closing = True

    def characters(self, content: str) -> None:
        line, col = self._position()
        _append(self.document, self._stack, Text(raw=content, start_line=line, start_col=col))

    ignorableWhitespace = characters


class MarkupParser:
    """Markup parser for HTML-like documents.

    Produces a Document tree with node kinds, attribute tokens and source
    positions, ready to be walked by lint rules.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize parser with configuration.

        Args:
            config: Parser configuration dict, uses DEFAULT_CONFIG if None
        """
        self.config = {**DEFAULT_CONFIG, **(config or {})}
        self._dynamic_patterns = TemplateUtils.compile_patterns(self.config['dynamic_value_patterns'])

    def resolve_syntax(self, file_path: str, syntax: Optional[str] = None) -> str:
        """Pick 'html' or 'xml' for a file."""
        chosen = syntax or self.config.get('syntax', 'auto')
        if chosen != 'auto':
            return chosen
        return 'xml' if Path(file_path).suffix.lower() in XML_SUFFIXES else 'html'

    def parse_file(self, file_path: Path, syntax: Optional[str] = None) -> ParseResult:
        """Parse a markup file.

        Args:
            file_path: Path to the document
            syntax: Force 'html' or 'xml' instead of the configured syntax

        Returns:
            ParseResult with the document or error information
        """
        try:
            content = file_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            return ParseResult(success=False, errors=[f"Read error: {e}"], file_path=str(file_path))
        return self.parse_content(content, str(file_path), syntax)

    def parse_content(self, content: str, file_path: str = "<string>",
                      syntax: Optional[str] = None) -> ParseResult:
        """Parse markup content from string.

        Args:
            content: Raw markup
            file_path: Virtual file path for error reporting
            syntax: Force 'html' or 'xml' instead of the configured syntax

        Returns:
            ParseResult with the document or error information
        """
        start_time = time.time()
        resolved = self.resolve_syntax(file_path, syntax)
        result = ParseResult(file_path=file_path)
        diagnostics = ParseDiagnostics(syntax=resolved)
        diagnostics.processing_steps.append("parse_content_started")

        try:
            document, warnings = self._build(content, file_path, resolved)
            diagnostics.processing_steps.append("tree_built")
            if warnings and self.config.get('strict_mode', False):
                result.success = False
                result.errors.extend(warnings)
            else:
                result.warnings.extend(warnings)
            result.document = document
            self._collect_statistics(document, diagnostics)
        except ParseError as e:
            result.success = False
            result.errors.append(f"Parse error: {e}")
            diagnostics.processing_steps.append("parse_failed")

        result.parse_time_ms = (time.time() - start_time) * 1000
        diagnostics.performance_metrics['parse_ms'] = result.parse_time_ms
        result.diagnostics = diagnostics
        return result

    def parse_document(self, content: str, file_path: str = "<string>",
                       syntax: Optional[str] = None) -> Document:
        """Parse content and return the document, raising on failure."""
        document, _warnings = self._build(content, file_path, self.resolve_syntax(file_path, syntax))
        return document

    def _build(self, content: str, file_path: str, syntax: str):
        document = Document(source=content, file_path=file_path, syntax=syntax)
        if syntax == 'xml':
            builder = _XmlTreeBuilder(document, self._dynamic_patterns)
            try:
                defused_parse_string(content.encode('utf-8'), builder)
            except SAXParseException as e:
                raise ParseError(e.getMessage(), e.getLineNumber(), e.getColumnNumber() + 1) from e
            except DefusedXmlException as e:
                raise ParseError(f"Forbidden XML construct: {e}") from e
            return document, []
        if syntax != 'html':
            raise ParseError(f"Unknown syntax: {syntax}")
        builder = _HtmlTreeBuilder(document, self._dynamic_patterns)
        builder.feed(content)
        builder.close()
        return document, builder.warnings

    @staticmethod
    def _collect_statistics(document: Document, diagnostics: ParseDiagnostics) -> None:
        for node in document.iter_nodes():
            diagnostics.total_nodes += 1
            if isinstance(node, Element):
                diagnostics.elements_found += 1
                diagnostics.attributes_found += len(node.attributes)
                diagnostics.dynamic_values_found += sum(1 for a in node.attributes if a.is_dynamic_value)
                depth = 0
                ancestor = node.parent
                while ancestor is not None:
                    depth += 1
                    ancestor = ancestor.parent
                diagnostics.max_depth = max(diagnostics.max_depth, depth + 1)
            elif isinstance(node, Text):
                diagnostics.text_nodes_found += 1
