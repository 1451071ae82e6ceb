"""Link parsers package."""

from ._BaseParser import BaseParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

__all__ = [
    "BaseParser",
    "LinkRef",
    "MarkdownParser",
]
