"""
Document implementation.
This module wraps a parsed tree and exposes serialization and selection.
"""

import logging
from typing import Iterator, List, Optional

from .node import Element, Empty, Node

logger = logging.getLogger(__name__)


class Document:
    """
    Parsed document.

    The tree is only mutated while parsing. Afterwards ``filter`` and ``find``
    consume the document and may reuse its nodes, while ``to_filtered`` and
    ``to_found`` leave it untouched and return independent copies.
    """

    def __init__(self, root: Optional[Node] = None):
        """
        Initialize a document.

        Args:
            root: Root node of the tree, Empty by default
        """
        self.root: Node = root if root is not None else Empty()

    def to_string(self) -> str:
        """
        Serialize the document.

        Returns:
            The canonical markup of the tree
        """
        return self.root.to_string()

    def is_empty(self) -> bool:
        return self.root.is_empty()

    def walk(self) -> Iterator[Node]:
        """Iterate over every node in document order."""
        return self.root.walk()

    def get_elements_by_tag_name(self, tag_name: str) -> List[Element]:
        """
        Get all elements with a given tag name.

        Args:
            tag_name: Tag name to match

        Returns:
            List[Element]: Matching elements in document order
        """
        return [node for node in self.walk()
                if isinstance(node, Element) and node.tag_name == tag_name]

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        """
        Get the first element whose ``id`` attribute equals ``element_id``.

        Returns:
            Optional[Element]: The element or None if not found
        """
        for node in self.walk():
            if isinstance(node, Element) and node.header.find_attr_value("id") == element_id:
                return node
        return None

    def filter(self, filter) -> 'Document':
        """
        Filter the document, reusing its nodes.

        The document must not be used afterwards.

        Args:
            filter: Selection rules, see ``Filter``

        Returns:
            Document: The pruned document
        """
        from ..selection.engine import filter_node

        root = filter_node(self.root, filter)
        self.root = Empty()
        logger.debug(f"Applied {filter!r}")
        return Document(root)

    def to_filtered(self, filter) -> 'Document':
        """
        Filter a copy of the document.

        Args:
            filter: Selection rules, see ``Filter``

        Returns:
            Document: The pruned document, sharing no node with this one
        """
        from ..selection.engine import filter_node

        logger.debug(f"Applied {filter!r} to a copy")
        return Document(filter_node(self.root, filter, clone=True))

    def find(self, filter) -> 'Document':
        """
        Find the first node selected by a filter, consuming the document.

        Returns:
            Document: The node, or an empty document if nothing matched
        """
        from ..selection.engine import find_first

        return Document(find_first(self.filter(filter).root))

    def to_found(self, filter) -> 'Document':
        """
        Find the first node selected by a filter in a copy of the document.

        Returns:
            Document: The node, or an empty document if nothing matched
        """
        from ..selection.engine import find_first

        return Document(find_first(self.to_filtered(filter).root))

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.root == other.root

    def __repr__(self) -> str:
        return f"Document({self.root!r})"
