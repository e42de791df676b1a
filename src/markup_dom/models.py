"""Data models for parsed markup documents.

Nodes are plain dataclasses. A parent owns its children; every child keeps a
non-owning reference back to its parent for scope lookups.
"""

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Iterator, List, Optional, Union

from .utils import TextUtils


class NodeType(str, Enum):
    """Kind tags for document nodes."""
    ELEMENT = "Element"
    TEXT = "Text"
    COMMENT = "Comment"
    DOCTYPE = "Doctype"


@dataclass
class ValueNode:
    """Source span of an attribute value, without its quotes."""
    raw: str
    start_line: int
    start_col: int


@dataclass(eq=False)
class AttributeToken:
    """A single attribute occurrence on an element."""
    name: str
    value: str                                  # Decoded value
    raw: str                                    # Raw text, name="value"
    start_line: int
    start_col: int
    value_node: Optional[ValueNode] = None      # None for boolean attributes
    is_dynamic_value: bool = False              # Templated, unknown until render
    owner: Optional['Element'] = field(default=None, repr=False)

    @property
    def potential_name(self) -> str:
        """Name used for specification lookups."""
        return self.name.lower()


@dataclass(eq=False)
class Node:
    """Base class for every node in the tree."""
    NODE_TYPE: ClassVar[NodeType]

    raw: str = ""
    start_line: int = 1
    start_col: int = 1
    parent: Optional['Element'] = field(default=None, repr=False)

    @property
    def node_type(self) -> NodeType:
        return self.NODE_TYPE

    def is_(self, node_type: Union[NodeType, str]) -> bool:
        """Check the node kind against a tag."""
        return self.NODE_TYPE == NodeType(node_type)


@dataclass(eq=False)
class Text(Node):
    NODE_TYPE: ClassVar[NodeType] = NodeType.TEXT

    def is_whitespace(self) -> bool:
        return TextUtils.is_whitespace(self.raw)


@dataclass(eq=False)
class Comment(Node):
    NODE_TYPE: ClassVar[NodeType] = NodeType.COMMENT


@dataclass(eq=False)
class Doctype(Node):
    NODE_TYPE: ClassVar[NodeType] = NodeType.DOCTYPE


@dataclass(eq=False)
class Element(Node):
    """Element node with attribute tokens and owned children."""
    NODE_TYPE: ClassVar[NodeType] = NodeType.ELEMENT

    name: str = ""
    namespace: str = "html"                     # 'html', 'svg', 'mathml' or a raw URI
    attributes: List[AttributeToken] = field(default_factory=list)
    children: List[Node] = field(default_factory=list)
    self_closing: bool = False

    @property
    def local_name(self) -> str:
        """Element name without prefix, lower-cased for lookups."""
        return self.name.split(':')[-1].lower()

    @property
    def child_nodes(self) -> List[Node]:
        return list(self.children)

    def append_child(self, node: Node) -> None:
        node.parent = self
        self.children.append(node)

    def add_attribute(self, attr: AttributeToken) -> None:
        attr.owner = self
        self.attributes.append(attr)

    def get_attribute_token(self, name: str) -> List[AttributeToken]:
        """Get every token for an attribute name (case-insensitive)."""
        wanted = name.lower()
        return [attr for attr in self.attributes if attr.name.lower() == wanted]

    def get_attribute(self, name: str) -> Optional[str]:
        """Get the value of the first matching attribute or None."""
        tokens = self.get_attribute_token(name)
        return tokens[0].value if tokens else None

    def has_attribute(self, name: str) -> bool:
        return bool(self.get_attribute_token(name))


@dataclass
class Document:
    """Parsed markup document and its traversal API."""
    children: List[Node] = field(default_factory=list)
    source: str = ""
    file_path: str = "<string>"
    syntax: str = "html"

    def append_child(self, node: Node) -> None:
        node.parent = None
        self.children.append(node)

    def iter_nodes(self, kind: Union[NodeType, str, None] = None) -> Iterator[Node]:
        """Yield nodes lazily in document pre-order.

        Args:
            kind: Only yield nodes of this kind (all nodes if None)

        Returns:
            Single-pass iterator over matching nodes
        """
        wanted = NodeType(kind) if kind is not None else None
        stack: List[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if wanted is None or node.NODE_TYPE == wanted:
                yield node
            if isinstance(node, Element):
                stack.extend(reversed(node.children))

    async def walk_on(self, kind: Union[NodeType, str], callback: Callable[[Any], Any]) -> None:
        """Visit every node of a kind in document order.

        The callback runs once per node. Awaitable results are awaited before
        the next node is visited, so visits never overlap. Exceptions raised by
        the callback propagate to the caller.

        Args:
            kind: Node kind to visit (NodeType or its tag, e.g. "Element")
            callback: Sync or async callable receiving the node
        """
        for node in self.iter_nodes(kind):
            outcome = callback(node)
            if inspect.isawaitable(outcome):
                await outcome

    @property
    def elements(self) -> List[Element]:
        return [node for node in self.iter_nodes(NodeType.ELEMENT)]


@dataclass
class ParseDiagnostics:
    """Detailed diagnostic information about a parsing operation."""
    total_nodes: int = 0
    elements_found: int = 0
    text_nodes_found: int = 0
    attributes_found: int = 0
    dynamic_values_found: int = 0
    max_depth: int = 0
    syntax: Optional[str] = None
    processing_steps: List[str] = field(default_factory=list)
    performance_metrics: dict = field(default_factory=dict)


@dataclass
class ParseResult:
    """Complete parsing result with success/error information and diagnostics."""
    document: Optional[Document] = None
    success: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    parse_time_ms: float = 0.0
    file_path: Optional[str] = None
    diagnostics: Optional[ParseDiagnostics] = None
