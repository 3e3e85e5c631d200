"""
Tag header parser.

Called when the parse driver reads '<'. Reads one tag header, comment opener
or doctype up to and including the closing '>', and classifies it.
"""

from enum import Enum
from typing import List, Optional

from ..dom.attr import Attribute, TagHeader
from ..errors import TagSyntaxError, invalid_char


class Cursor:
    """Forward cursor over the input text that can be rewound to a mark."""

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def next(self) -> Optional[str]:
        """
        Consume one character.

        Returns:
            The character, or None at end of input
        """
        if self.position >= len(self.text):
            return None
        ch = self.text[self.position]
        self.position += 1
        return ch

    def mark(self) -> int:
        return self.position

    def reset(self, mark: int) -> None:
        self.position = mark


class TagKind(Enum):
    """Classification of a parsed header."""
    OPEN = "open"              # <div>
    OPEN_CLOSE = "open_close"  # <div />
    CLOSE = "close"            # </div>
    DOCTYPE = "doctype"        # <!DOCTYPE html>
    COMMENT = "comment"        # <!--


class ParsedTag:
    """Result of ``parse_tag``."""

    def __init__(self, kind: TagKind, header: Optional[TagHeader] = None,
                 name: str = "", attr: Optional[str] = None):
        self.kind = kind
        self.header = header
        self.name = header.name if header is not None else name
        self.attr = attr

    def __repr__(self) -> str:
        return f"ParsedTag({self.kind.name}, {self.name!r})"


class _State(Enum):
    # in the order they are reached
    NAME = 0
    ATTRIBUTE_NONE = 1
    ATTRIBUTE_NAME = 2
    ATTRIBUTE_EQ = 3
    ATTRIBUTE_SINGLE = 4
    ATTRIBUTE_DOUBLE = 5


class _Close(Enum):
    """Position of '/' relative to the tag name."""
    NONE = 0
    BEFORE = 1  # </div>
    AFTER = 2   # <div/>


_TERMINABLE = (_State.NAME, _State.ATTRIBUTE_NONE, _State.ATTRIBUTE_NAME)


def parse_tag(cursor: Cursor) -> ParsedTag:
    """
    Parse a tag header from a cursor positioned just after '<'.

    Args:
        cursor: Input cursor; advanced past the closing '>'

    Returns:
        The classified header

    Raises:
        TagSyntaxError: On an invalid character or end of input before '>'
    """
    state = _State.NAME
    close = _Close.NONE
    bang = False
    dash = False
    name: List[str] = []
    attrs: List[Attribute] = []
    attr_name: List[str] = []

    def finish_attribute() -> None:
        attrs.append(Attribute("".join(attr_name)))
        attr_name.clear()

    while True:
        start = cursor.position
        ch = cursor.next()
        if ch is None:
            raise TagSyntaxError("EOF: Missing closing '>'.", start)

        if state is _State.NAME and ch == '-' and bang and not name:
            if dash:
                return ParsedTag(TagKind.COMMENT)
            dash = True
            continue
        if dash:
            raise _at(invalid_char('-', "doctype"), start)

        if state in _TERMINABLE and ch == '>':
            if state is _State.ATTRIBUTE_NAME:
                finish_attribute()
            return _build_result(bang, close, "".join(name), attrs, start)

        if state in _TERMINABLE and ch == '/':
            if state is _State.NAME and not name:
                close = _Close.BEFORE
            else:
                if state is _State.ATTRIBUTE_NAME:
                    finish_attribute()
                    state = _State.ATTRIBUTE_NONE
                close = _Close.AFTER
            continue

        if state is _State.NAME:
            if ch == '!':
                if name:
                    raise _at(invalid_char(ch, "tag name"), start)
                bang = True
            elif ch == ':':
                raise _at(invalid_char(ch, "tag name"), start)
            elif ch.isspace():
                state = _State.ATTRIBUTE_NONE
            else:
                name.append(ch)

        elif state is _State.ATTRIBUTE_NONE:
            if not ch.isspace():
                attr_name.append(ch)
                state = _State.ATTRIBUTE_NAME

        elif state is _State.ATTRIBUTE_NAME:
            if ch == '=':
                finish_attribute()
                state = _State.ATTRIBUTE_EQ
            elif ch.isspace():
                finish_attribute()
                state = _State.ATTRIBUTE_NONE
            elif ch == ':' and ':' in attr_name:
                raise TagSyntaxError("Found 2 colons ':' in attribute name.", start)
            else:
                attr_name.append(ch)

        elif state is _State.ATTRIBUTE_EQ:
            if ch == '"':
                attrs[-1].add_value(double_quote=True)
                state = _State.ATTRIBUTE_DOUBLE
            elif ch == "'":
                attrs[-1].add_value(double_quote=False)
                state = _State.ATTRIBUTE_SINGLE
            else:
                raise TagSyntaxError(
                    f"Invalid character '{ch}': expected ''' or '\"' after '=' sign.", start
                )

        elif (state is _State.ATTRIBUTE_SINGLE and ch == "'") or \
                (state is _State.ATTRIBUTE_DOUBLE and ch == '"'):
            state = _State.ATTRIBUTE_NONE

        else:
            attrs[-1].push_value(ch)


def _at(error: TagSyntaxError, position: int) -> TagSyntaxError:
    error.position = position
    return error


def _build_result(bang: bool, close: _Close, name: str,
                  attrs: List[Attribute], position: int) -> ParsedTag:
    """Classify a header from its bang flag and '/' position."""
    if bang:
        if close is _Close.AFTER:
            raise _at(invalid_char('/', "doctype"), position)
        if close is _Close.BEFORE:
            raise _at(invalid_char('!', "closing tag"), position)
        if len(attrs) >= 2:
            raise TagSyntaxError("Doctype expected at most one attribute.", position)
        attr = None
        if attrs:
            if attrs[0].has_value:
                raise TagSyntaxError("Doctype attribute must not have a value.", position)
            attr = attrs[0].name
        return ParsedTag(TagKind.DOCTYPE, name=name, attr=attr)

    if close is _Close.BEFORE:
        if attrs:
            raise TagSyntaxError("Closing tags don't support attributes.", position)
        return ParsedTag(TagKind.CLOSE, name=name)
    if close is _Close.AFTER:
        return ParsedTag(TagKind.OPEN_CLOSE, header=TagHeader(name, attrs))
    return ParsedTag(TagKind.OPEN, header=TagHeader(name, attrs))
