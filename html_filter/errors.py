"""
Error types raised while parsing markup.

Every user-facing failure is a ParseError. Lexical problems inside a tag
header raise TagSyntaxError, problems with the shape of the tree (mismatched
or unopened closing tags, stray comment terminators) raise
TreeStructureError.
"""

from typing import Optional


class ParseError(Exception):
    """Base class for errors that abort a parse."""

    def __init__(self, message: str, position: Optional[int] = None):
        """
        Initialize the error.

        Args:
            message: Human readable description of the problem
            position: Index in the input where the problem was detected
        """
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        return self.message


class TagSyntaxError(ParseError):
    """Invalid character or premature end of input inside a tag header."""


class TreeStructureError(ParseError):
    """Closing tag or comment terminator that does not fit the open tree."""


class NestingDepthError(TreeStructureError):
    """Markup nested deeper than the configured maximum."""


class InternalError(RuntimeError):
    """Broken internal invariant. This always indicates a bug."""

    def __init__(self, reason: str):
        super().__init__(f"This is not meant to happen, please report it: {reason}")


def invalid_char(ch: str, context: str) -> TagSyntaxError:
    """Build the error for a character that is not allowed in ``context``."""
    return TagSyntaxError(f"Invalid character '{ch}' in {context}.")
