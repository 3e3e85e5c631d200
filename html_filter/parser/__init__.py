"""
Markup parser: tag header state machine and the single pass parse driver.
"""

from .html_parser import HTMLParser, parse
from .tag_parser import Cursor, ParsedTag, TagKind, parse_tag

__all__ = ['HTMLParser', 'parse', 'Cursor', 'ParsedTag', 'TagKind', 'parse_tag']
