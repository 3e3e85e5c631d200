"""
Selection engine.

Walks a tree with a Filter and builds the pruned tree. The heavy pass decides
which tags are selected and how many of their ancestors are kept; the light
pass copies a kept subtree, dropping only the node kinds that are turned off
and the explicitly blacklisted tags.
"""

import logging
from typing import List, NamedTuple, Optional

from ..dom.node import Comment, DocumentType, Element, Empty, Node, Sequence, Text, make_sequence
from .filter import Filter

logger = logging.getLogger(__name__)


class DepthStatus(NamedTuple):
    """
    How far up the tree the content of a filtered subtree still has to be
    kept.

    Ordered Found(0) < Found(1) < ... < SUCCESS < NONE:

    - Found(d): a selected tag sits d generations below; ancestors are kept
      while d is below the filter depth
    - SUCCESS: selected content was found and its ancestor window is full
    - NONE: nothing selected below
    """
    rank: int
    depth: int = 0

    @classmethod
    def found(cls, depth: int) -> 'DepthStatus':
        return cls(0, depth)

    @property
    def is_found(self) -> bool:
        return self.rank == 0

    def incr(self) -> 'DepthStatus':
        """Increment the depth of a Found status; others are unchanged."""
        if self.is_found:
            return DepthStatus.found(self.depth + 1)
        return self

    def __repr__(self) -> str:
        if self.is_found:
            return f"Found({self.depth})"
        return "Success" if self.rank == 1 else "None"


SUCCESS = DepthStatus(1)
NONE = DepthStatus(2)


class FilterSuccess:
    """Filtered subtree and its status, passed up during the heavy pass."""

    def __init__(self, status: DepthStatus = NONE, node: Optional[Node] = None):
        self.status = status
        self.node: Node = node if node is not None else Empty()

    def incr(self) -> 'FilterSuccess':
        self.status = self.status.incr()
        return self

    def __repr__(self) -> str:
        return f"FilterSuccess({self.status!r}, {self.node!r})"


def probe_depth(node: Node, max_depth: int, filter: Filter) -> Optional[int]:
    """
    Distance from ``node`` to the closest selected tag below it.

    Only tags count as hops; a Sequence takes the minimum over its children.
    The search stops ``max_depth`` tags down.

    Returns:
        The distance, or None if no selected tag is within reach
    """
    if isinstance(node, Element):
        if filter.tag_explicitly_allowed(node.header):
            return 0
        if max_depth == 0 or filter.tag_explicitly_blacklisted(node.header):
            return None
        depth = probe_depth(node.child, max_depth - 1, filter)
        return None if depth is None else depth + 1
    if isinstance(node, Sequence):
        best: Optional[int] = None
        for child in node.children:
            depth = probe_depth(child, max_depth, filter)
            if depth is not None and (best is None or depth < best):
                best = depth
                if best == 0:
                    break
        return best
    return None


class SelectionEngine:
    """
    Applies a Filter to a tree.

    Args:
        filter: The selection rules
        clone: Copy every kept node instead of reusing it, so the source
            tree stays untouched and independent of the result
    """

    def __init__(self, filter: Filter, clone: bool = False):
        self.filter = filter
        self.clone = clone

    def run(self, node: Node) -> Node:
        return self.heavy(node, self.contains_match(node)).node

    def contains_match(self, node: Node) -> bool:
        """Whether a selected tag is reachable, i.e. not below a dropped tag."""
        stack = [node]
        while stack:
            current = stack.pop()
            if isinstance(current, Element):
                if self.filter.tag_explicitly_allowed(current.header):
                    return True
                if not self.filter.tag_explicitly_blacklisted(current.header):
                    stack.append(current.child)
            elif isinstance(current, Sequence):
                stack.extend(current.children)
        return False

    def _own(self, node: Node) -> Node:
        return node.clone() if self.clone else node

    def _rewrap(self, element: Element, child: Node) -> Element:
        header = element.header.clone() if self.clone else element.header
        return Element(header, element.closing, child, element.void)

    def heavy(self, node: Node, found: bool) -> FilterSuccess:
        """
        Heavy pass over ``node``.

        Args:
            node: Subtree to filter
            found: Whether the tree holds selected content, in which case
                comments and doctypes outside every kept window are dropped
        """
        if isinstance(node, Element):
            return self._heavy_element(node, found)
        if isinstance(node, Sequence):
            return self._heavy_sequence(node, found)
        if isinstance(node, Text):
            if self.filter.kind_kept_outside("text"):
                return FilterSuccess(NONE, self._own(node))
            return FilterSuccess()
        if isinstance(node, Comment):
            if not found and self.filter.kind_kept_outside("comment"):
                return FilterSuccess(NONE, self._own(node))
            return FilterSuccess()
        if isinstance(node, DocumentType):
            if not found and self.filter.kind_kept_outside("doctype"):
                return FilterSuccess(NONE, self._own(node))
            return FilterSuccess()
        return FilterSuccess()

    def _heavy_element(self, element: Element, found: bool) -> FilterSuccess:
        if self.filter.tag_allowed(element.header):
            return FilterSuccess(DepthStatus.found(0),
                                 self._rewrap(element, self.light(element.child)))
        if self.filter.tag_explicitly_blacklisted(element.header):
            return FilterSuccess()

        depth = self.filter.as_depth
        if depth == 0:
            # the tag itself is dropped, its content is lifted up
            return self.heavy(element.child, found).incr()

        rec = self.heavy(element.child, found)
        if rec.status == NONE or rec.status == SUCCESS:
            # loose content of an unselected tag is lifted like at depth 0
            return rec
        if rec.status.depth < depth:
            return FilterSuccess(rec.status.incr(), self._rewrap(element, rec.node))
        return FilterSuccess(SUCCESS, rec.node)

    def _heavy_sequence(self, sequence: Sequence, found: bool) -> FilterSuccess:
        depth = self.filter.as_depth
        best: Optional[int] = None
        for child in sequence.children:
            probed = probe_depth(child, depth + 1, self.filter)
            if probed is not None and (best is None or probed < best):
                best = probed

        if best is not None and best < depth:
            # the whole sequence lies inside the ancestor window
            node = self._light_children(sequence)
            return FilterSuccess(DepthStatus.found(best), node)

        if best is not None:
            nodes = []
            for child in sequence.children:
                nodes.append(self.heavy(child, True).node)
            return FilterSuccess(SUCCESS, make_sequence(nodes))

        kept: List[FilterSuccess] = []
        for child in sequence.children:
            rec = self.heavy(child, found)
            if not rec.node.is_empty():
                kept.append(rec)
        if not kept:
            return FilterSuccess()
        if len(kept) == 1:
            return kept[0]
        status = min(rec.status for rec in kept)
        return FilterSuccess(status, make_sequence(rec.node for rec in kept))

    def light(self, node: Node) -> Node:
        """
        Light pass over a kept subtree.

        Keeps every node except the node kinds turned off and the explicitly
        blacklisted tags, which are dropped with their content.
        """
        if isinstance(node, Element):
            if self.filter.tag_explicitly_blacklisted(node.header):
                return Empty()
            return self._rewrap(node, self.light(node.child))
        if isinstance(node, Sequence):
            return self._light_children(node)
        if isinstance(node, Text):
            return self._own(node) if self.filter.kind_allowed("text") else Empty()
        if isinstance(node, Comment):
            return self._own(node) if self.filter.kind_allowed("comment") else Empty()
        if isinstance(node, DocumentType):
            return self._own(node) if self.filter.kind_allowed("doctype") else Empty()
        return Empty()

    def _light_children(self, sequence: Sequence) -> Node:
        children = []
        for child in sequence.children:
            children.append(self.light(child))
        return make_sequence(children)


def filter_node(node: Node, filter: Filter, clone: bool = False) -> Node:
    """
    Filter a tree.

    Args:
        node: Root of the tree
        filter: The selection rules
        clone: Whether kept nodes are copied rather than reused

    Returns:
        The pruned tree
    """
    return SelectionEngine(filter, clone).run(node)


def find_first(node: Node) -> Node:
    """
    First non-empty node of a filtered tree, depth-first from the left.

    Returns:
        The node, or Empty if the tree is empty
    """
    if isinstance(node, Sequence):
        for child in node.children:
            first = find_first(child)
            if not first.is_empty():
                return first
        return Empty()
    return node
