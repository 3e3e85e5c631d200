"""
HTML parser implementation.
This module turns markup text into a tree in a single forward pass.
"""

import logging
from typing import Optional

from ..dom.document import Document
from ..dom.tree_builder import TreeBuilder
from ..errors import TagSyntaxError, TreeStructureError
from ..utils.config import Config
from .tag_parser import Cursor, ParsedTag, TagKind, parse_tag

logger = logging.getLogger(__name__)


class HTMLParser:
    """
    Single pass parser without error recovery.

    Characters are pushed one at a time into a TreeBuilder. On '<' the tag
    header parser reads the whole header. Runs of '-' are held back so that
    ``-->`` can close the open comment, and the content of raw-text elements
    (``script``, ``style``) is kept as text until their closing tag.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Configuration; the ``parser.*`` keys are read
        """
        config = config or Config()
        self.max_depth = int(config.get("parser.max_depth"))
        self.raw_text_elements = frozenset(name.lower() for name in config.get("parser.raw_text_elements"))
        self.void_elements = frozenset(name.lower() for name in config.get("parser.void_elements"))
        logger.debug(f"HTML parser initialized (max_depth: {self.max_depth})")

    def parse(self, text: str) -> Document:
        """
        Parse markup into a Document.

        Args:
            text: Markup to parse

        Returns:
            Document: The parsed tree

        Raises:
            ParseError: On the first syntax or structure error
        """
        builder = TreeBuilder(self.max_depth)
        cursor = Cursor(text)
        dash_count = 0
        in_comment = False
        raw_text: Optional[str] = None

        while True:
            position = cursor.position
            ch = cursor.next()
            if ch is None:
                break

            if raw_text is not None and not in_comment:
                if ch == '<' and self._closes_raw_text(cursor, raw_text):
                    builder.close_tag(raw_text)
                    logger.debug(f"Left raw text element '{raw_text}'")
                    raw_text = None
                    continue
                builder.push_char(ch)
                continue

            if ch == '-':
                if dash_count == 2:
                    builder.push_char('-')
                else:
                    dash_count += 1
                continue

            if ch == '>' and dash_count == 2:
                if not builder.close_comment():
                    raise TreeStructureError("Tried to close unopened comment.", position)
                in_comment = False
                dash_count = 0
                continue

            for _ in range(dash_count):
                builder.push_char('-')
            dash_count = 0

            if in_comment or ch != '<':
                builder.push_char(ch)
                continue

            tag = parse_tag(cursor)
            try:
                raw_text = self._push_tag(builder, tag)
            except TreeStructureError as e:
                if e.position is None:
                    e.position = position
                raise
            if tag.kind is TagKind.COMMENT:
                in_comment = True
            elif raw_text is not None:
                logger.debug(f"Entered raw text element '{raw_text}'")

        for _ in range(dash_count):
            builder.push_char('-')

        document = Document(builder.finish())
        logger.debug(f"Parsed {len(text)} characters")
        return document

    def _push_tag(self, builder: TreeBuilder, tag: ParsedTag) -> Optional[str]:
        """
        Fold a parsed header into the tree.

        Returns:
            The tag name if it opened a raw-text element, else None
        """
        if tag.kind is TagKind.DOCTYPE:
            builder.push_doctype(tag.name, tag.attr)
        elif tag.kind is TagKind.OPEN:
            if tag.name.lower() in self.void_elements:
                builder.push_tag(tag.header, void=True)
            else:
                builder.push_tag(tag.header)
                if tag.name.lower() in self.raw_text_elements:
                    return tag.name
        elif tag.kind is TagKind.OPEN_CLOSE:
            builder.push_tag(tag.header, self_closing=True)
        elif tag.kind is TagKind.CLOSE:
            builder.close_tag(tag.name)
        else:
            builder.open_comment()
        return None

    @staticmethod
    def _closes_raw_text(cursor: Cursor, name: str) -> bool:
        """
        Look ahead for the closing tag of a raw-text element.

        The cursor is left after the closing tag on success and rewound
        otherwise, so the '<' is kept as literal text.
        """
        mark = cursor.mark()
        try:
            tag = parse_tag(cursor)
        except TagSyntaxError:
            tag = None
        if tag is not None and tag.kind is TagKind.CLOSE and tag.name == name:
            return True
        cursor.reset(mark)
        return False


def parse(text: str, config: Optional[Config] = None) -> Document:
    """
    Parse markup into a Document.

    Args:
        text: Markup to parse
        config: Optional configuration

    Returns:
        Document: The parsed tree

    Raises:
        ParseError: On the first syntax or structure error
    """
    return HTMLParser(config).parse(text)
