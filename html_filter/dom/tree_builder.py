"""
Tree builder for the markup tree.

The node currently receiving content is found structurally: starting from
the root, follow the last child of any Sequence and the child of any OPENED
Element. The tree therefore is the stack of open elements, and there is no
separate bookkeeping that could drift away from the tree shape.
"""

import logging
from typing import Optional, Tuple

from ..errors import InternalError, NestingDepthError, TreeStructureError
from .attr import TagHeader
from .node import ClosingKind, Comment, DocumentType, Element, Empty, Node, Sequence, Text

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 128


class TreeBuilder:
    """
    Mutable tree under construction.

    Each push replaces the root with the (possibly new) node returned by the
    recursive helpers, since a leaf can turn into a Sequence when a sibling
    arrives.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize an empty builder.

        Args:
            max_depth: Maximum number of nested elements accepted
        """
        self.root: Node = Empty()
        self.max_depth = max_depth

    def push_char(self, ch: str) -> None:
        """Push one character of text (or comment content) into the tree."""
        self.root = _push_char(self.root, ch)

    def push_node(self, node: Node) -> None:
        """
        Push a whole subtree at the current position.

        Raises:
            NestingDepthError: If an element would be nested too deeply
        """
        self.root = self._push_node(self.root, node, 0)

    def push_tag(self, header: TagHeader, self_closing: bool = False, void: bool = False) -> None:
        """
        Push a tag with an empty child.

        Args:
            header: Name and attributes of the tag
            self_closing: Whether the tag was written ``<name />``
            void: Whether the tag is a void element that is complete as is
        """
        if self_closing:
            closing = ClosingKind.SELF_CLOSING
        elif void:
            closing = ClosingKind.CLOSED
        else:
            closing = ClosingKind.OPENED
        self.push_node(Element(header, closing, Empty(), void=void and not self_closing))

    def push_doctype(self, name: str, attr: Optional[str]) -> None:
        self.push_node(DocumentType(name, attr))

    def open_comment(self) -> None:
        """Push a comment that receives characters until closed."""
        self.push_node(Comment("", closed=False))

    def close_comment(self) -> bool:
        """
        Close the open comment, if any.

        Returns:
            True if a comment was open and is now closed
        """
        return _close_comment(self.root)

    def close_tag(self, name: str) -> None:
        """
        Close the innermost open element, which must be named ``name``.

        Raises:
            TreeStructureError: If another element is still open inside, or
                if no element is open at all
        """
        closed, still_open = _close_tag(self.root, name)
        if closed:
            return
        if still_open is not None:
            raise TreeStructureError(
                f"Invalid closing tag: found closing tag for '{name}' but '{still_open}' is still open."
            )
        raise TreeStructureError(
            f"Invalid closing tag: found closing tag for '{name}' but no tag is open."
        )

    def finish(self) -> Node:
        """Return the built tree."""
        return self.root

    def _push_node(self, current: Node, node: Node, level: int) -> Node:
        if isinstance(current, Empty):
            self._check_depth(node, level)
            return node
        if isinstance(current, Element) and current.is_open:
            current.child = self._push_node(current.child, node, level + 1)
            return current
        if isinstance(current, Sequence):
            last = current.last
            if _is_pushable(last, for_char=False):
                current.children[-1] = self._push_node(last, node, level)
            else:
                self._check_depth(node, level)
                current.children.append(node)
            return current
        if isinstance(current, Comment) and not current.closed:
            raise InternalError("Pushed a node into an unclosed comment.")
        self._check_depth(node, level)
        return Sequence([current, node])

    def _check_depth(self, node: Node, level: int) -> None:
        # level counts the open elements above the insertion point
        if isinstance(node, Element) and level >= self.max_depth:
            raise NestingDepthError(f"Maximum nesting depth of {self.max_depth} exceeded.")


def _is_pushable(node: Node, for_char: bool) -> bool:
    """Whether new content must go inside ``node`` rather than next to it."""
    if isinstance(node, Element):
        return node.is_open
    if isinstance(node, Text):
        return for_char
    if isinstance(node, Comment):
        return not node.closed
    if isinstance(node, DocumentType):
        return False
    raise InternalError("Sequence or Empty found inside a sequence.")


def _push_char(current: Node, ch: str) -> Node:
    if isinstance(current, Empty):
        return Text(ch)
    if isinstance(current, Text):
        current.append_data(ch)
        return current
    if isinstance(current, Comment) and not current.closed:
        current.append_data(ch)
        return current
    if isinstance(current, Element) and current.is_open:
        current.child = _push_char(current.child, ch)
        return current
    if isinstance(current, Sequence):
        last = current.last
        if _is_pushable(last, for_char=True):
            current.children[-1] = _push_char(last, ch)
        else:
            current.children.append(Text(ch))
        return current
    # closed element, doctype or closed comment
    return Sequence([current, Text(ch)])


def _close_comment(current: Node) -> bool:
    if isinstance(current, Comment):
        if current.closed:
            return False
        current.closed = True
        return True
    if isinstance(current, Element):
        return current.is_open and _close_comment(current.child)
    if isinstance(current, Sequence):
        return _close_comment(current.last)
    return False


def _close_tag(current: Node, name: str) -> Tuple[bool, Optional[str]]:
    """
    Close the deepest open element along the open path.

    Returns:
        ``(True, None)`` once closed, ``(False, open_name)`` when the deepest
        open element has another name, ``(False, None)`` when nothing is open
    """
    if isinstance(current, Element) and current.is_open:
        closed, still_open = _close_tag(current.child, name)
        if closed or still_open is not None:
            return closed, still_open
        if current.header.name == name:
            current.closing = ClosingKind.CLOSED
            return True, None
        return False, current.header.name
    if isinstance(current, Sequence):
        return _close_tag(current.last, name)
    return False, None
