"""marklint - Pluggable static analysis for HTML-like markup.

marklint walks parsed markup documents and reports diagnostics against a
configurable rule set, including type-directed attribute value checks.
"""

__version__ = "0.1.0"
__author__ = "marklint contributors"
__description__ = "Pluggable static analysis for HTML-like markup"

from marklint.config import MarklintConfig

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "MarklintConfig",
]
