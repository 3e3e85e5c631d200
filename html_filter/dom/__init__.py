"""
Tree model for parsed markup.
"""

from .attr import Attribute, TagHeader
from .document import Document
from .node import (ClosingKind, Comment, DocumentType, Element, Empty, Node, Sequence,
                   Text, make_sequence)
from .tree_builder import TreeBuilder

__all__ = [
    'Attribute',
    'TagHeader',
    'Document',
    'Node',
    'ClosingKind',
    'Empty',
    'Text',
    'Comment',
    'DocumentType',
    'Element',
    'Sequence',
    'make_sequence',
    'TreeBuilder',
]
