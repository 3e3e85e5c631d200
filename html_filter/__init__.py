"""
html-filter - Parse HTML into a tree and select parts of it with composable rules.
"""

import logging

from html_filter.dom.attr import Attribute, TagHeader
from html_filter.dom.document import Document
from html_filter.dom.node import (ClosingKind, Comment, DocumentType, Element, Empty, Node,
                                  Sequence, Text)
from html_filter.errors import (InternalError, NestingDepthError, ParseError, TagSyntaxError,
                                TreeStructureError)
from html_filter.parser.html_parser import HTMLParser, parse
from html_filter.selection.filter import Filter

# Package information
__version__ = "1.0.0"
__description__ = "Parse HTML into a tree and select parts of it with composable rules"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'parse',
    'HTMLParser',
    'Document',
    'Filter',
    'Node',
    'ClosingKind',
    'Empty',
    'Text',
    'Comment',
    'DocumentType',
    'Element',
    'Sequence',
    'Attribute',
    'TagHeader',
    'ParseError',
    'TagSyntaxError',
    'TreeStructureError',
    'NestingDepthError',
    'InternalError',
]
