"""
Node implementation for the markup tree.
This module defines the node kinds a parsed document is made of and their
canonical serialization.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional

from .attr import TagHeader


class ClosingKind(Enum):
    """How a tag was terminated."""
    OPENED = "opened"              # <div> still receiving children
    CLOSED = "closed"              # <div>...</div>
    SELF_CLOSING = "self_closing"  # <div />


class Node:
    """
    Base class of every tree node.

    Subclasses implement ``to_string``, ``clone`` and structural equality.
    """

    node_name = "#node"

    def to_string(self) -> str:
        """
        Serialize this node and its descendants.

        Returns:
            The canonical markup for this subtree
        """
        parts: List[str] = []
        self._write(parts)
        return "".join(parts)

    def _write(self, parts: List[str]) -> None:
        raise NotImplementedError

    def clone(self) -> 'Node':
        """Deep copy of this subtree."""
        raise NotImplementedError

    def is_empty(self) -> bool:
        return False

    def walk(self) -> Iterator['Node']:
        """
        Iterate over this subtree depth-first, left to right.

        Sequences are transparent: their children are yielded, not the
        sequence itself. Empty nodes are skipped.

        Yields:
            Every Text, Comment, DocumentType and Element in document order
        """
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Sequence):
                stack.extend(reversed(node.children))
            elif isinstance(node, Element):
                yield node
                stack.append(node.child)
            elif not node.is_empty():
                yield node

    def __str__(self) -> str:
        return self.to_string()


class Empty(Node):
    """Empty tree, the serialization of an empty string."""

    node_name = "#empty"

    def _write(self, parts: List[str]) -> None:
        pass

    def clone(self) -> 'Empty':
        return Empty()

    def is_empty(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Empty)

    def __repr__(self) -> str:
        return "Empty()"


class Text(Node):
    """Raw text outside of any tag header."""

    node_name = "#text"

    def __init__(self, data: str = ""):
        self.data = data

    def append_data(self, data: str) -> None:
        self.data += data

    def _write(self, parts: List[str]) -> None:
        parts.append(self.data)

    def clone(self) -> 'Text':
        return Text(self.data)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Text) and self.data == other.data

    def __repr__(self) -> str:
        return f"Text({self.data!r})"


class Comment(Node):
    """
    Comment block, ``<!-- data -->``.

    ``closed`` becomes True once the terminating ``-->`` was read; an open
    comment keeps receiving characters.
    """

    node_name = "#comment"

    def __init__(self, data: str = "", closed: bool = True):
        self.data = data
        self.closed = closed

    def append_data(self, data: str) -> None:
        self.data += data

    def _write(self, parts: List[str]) -> None:
        parts.append("<!--")
        parts.append(self.data)
        if self.closed:
            parts.append("-->")

    def clone(self) -> 'Comment':
        return Comment(self.data, self.closed)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Comment) and self.data == other.data and self.closed == other.closed

    def __repr__(self) -> str:
        return f"Comment({self.data!r}, closed={self.closed})"


class DocumentType(Node):
    """
    Bang tag such as ``<!DOCTYPE html>``.

    Holds a name and at most one value-less attribute.
    """

    node_name = "#doctype"

    def __init__(self, name: str = "", attr: Optional[str] = None):
        self.name = name
        self.attr = attr

    def _write(self, parts: List[str]) -> None:
        if self.attr is not None:
            parts.append(f"<!{self.name} {self.attr}>")
        else:
            parts.append(f"<!{self.name}>")

    def clone(self) -> 'DocumentType':
        return DocumentType(self.name, self.attr)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DocumentType) and self.name == other.name and self.attr == other.attr

    def __repr__(self) -> str:
        return f"DocumentType({self.name!r}, {self.attr!r})"


class Element(Node):
    """
    Tag with its header, closing kind and a single child subtree.

    The child is Empty for self-closing and void elements. Only an OPENED
    element accepts further pushes into its child.
    """

    def __init__(self, header: TagHeader, closing: ClosingKind = ClosingKind.CLOSED,
                 child: Optional[Node] = None, void: bool = False):
        """
        Initialize an element.

        Args:
            header: Tag name and attributes
            closing: How the tag was terminated
            child: Content between the opening and closing tag
            void: Whether this is a void element written without end tag
        """
        self.header = header
        self.closing = closing
        self.child: Node = child if child is not None else Empty()
        self.void = void

    @property
    def node_name(self) -> str:
        return self.header.name

    @property
    def tag_name(self) -> str:
        return self.header.name

    @property
    def is_open(self) -> bool:
        return self.closing is ClosingKind.OPENED

    def _write(self, parts: List[str]) -> None:
        header = self.header.to_string()
        if self.closing is ClosingKind.SELF_CLOSING:
            parts.append(f"<{header} />")
            return
        parts.append(f"<{header}>")
        self.child._write(parts)
        if self.closing is ClosingKind.CLOSED and not self.void:
            parts.append(f"</{self.header.name}>")

    def clone(self) -> 'Element':
        return Element(self.header.clone(), self.closing, self.child.clone(), self.void)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return False
        return (self.header == other.header and self.closing == other.closing
                and self.void == other.void and self.child == other.child)

    def __repr__(self) -> str:
        return f"Element({self.header!r}, {self.closing.name}, {self.child!r})"


class Sequence(Node):
    """
    Ordered list of sibling nodes.

    A sequence always holds at least two children and never directly holds
    another sequence; use ``make_sequence`` to build one.
    """

    node_name = "#sequence"

    def __init__(self, children: List[Node]):
        self.children = children

    @property
    def last(self) -> Node:
        return self.children[-1]

    def _write(self, parts: List[str]) -> None:
        for child in self.children:
            child._write(parts)

    def clone(self) -> 'Sequence':
        return Sequence([child.clone() for child in self.children])

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Sequence) and self.children == other.children

    def __repr__(self) -> str:
        return f"Sequence({self.children!r})"


def make_sequence(nodes: Iterable[Node]) -> Node:
    """
    Collapse a list of nodes into a single node.

    Empty nodes are dropped and nested sequences are flattened. No node left
    gives Empty, exactly one is returned unwrapped, more become a Sequence.

    Args:
        nodes: Sibling nodes in document order

    Returns:
        The collapsed node
    """
    children: List[Node] = []
    for node in nodes:
        if isinstance(node, Sequence):
            children.extend(node.children)
        elif not node.is_empty():
            children.append(node)
    if not children:
        return Empty()
    if len(children) == 1:
        return children[0]
    return Sequence(children)
