"""Constants and configuration for markup parsing.

Element categories, namespace URIs and default parser settings
centralized for easy maintenance.
"""

from typing import Dict, FrozenSet, List

# Namespace URIs assigned to elements by the parsers
STANDARD_NAMESPACES: Dict[str, str] = {
    'html': 'http://www.w3.org/1999/xhtml',
    'svg': 'http://www.w3.org/2000/svg',
    'mathml': 'http://www.w3.org/1998/Math/MathML',
    'xlink': 'http://www.w3.org/1999/xlink',
}

# Elements that never have children or an end tag
VOID_ELEMENTS: FrozenSet[str] = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'source', 'track', 'wbr',
    # Obsolete but still void in the parsing algorithm
    'basefont', 'bgsound', 'frame', 'keygen', 'param',
})

# Whitespace characters as defined by the HTML standard
ASCII_WHITESPACE: str = ' \t\n\f\r'

# Template syntaxes whose attribute values are only known at render time
DYNAMIC_VALUE_PATTERNS: List[str] = [
    r'\{\{.*?\}\}',      # Mustache / Jinja / Vue
    r'\$\{.*?\}',        # JavaScript template literals
    r'<%.*?%>',          # ERB / EJS
    r'\{%.*?%\}',        # Jinja / Liquid statements
]

# File suffixes parsed with the XML syntax when syntax is "auto"
XML_SUFFIXES: FrozenSet[str] = frozenset({'.svg', '.xml', '.xhtml'})

# Default parser settings
DEFAULT_CONFIG = {
    'syntax': 'auto',                       # 'auto', 'html' or 'xml'
    'dynamic_value_patterns': DYNAMIC_VALUE_PATTERNS,
    'strict_mode': False,                   # Treat unbalanced end tags as errors
}
