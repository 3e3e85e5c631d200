"""
Allow/deny rules on tag names and attributes.

Rules are kept as association lists keyed by name: adding a rule for a name
that already has one replaces it.
"""

from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from ..dom.attr import TagHeader


class ElementState(Enum):
    """Outcome of checking a tag against one family of rules."""
    BLACKLISTED = "blacklisted"
    NOT_SPECIFIED = "not_specified"
    WHITELISTED = "whitelisted"

    def combine(self, other: 'ElementState') -> 'ElementState':
        """
        Combine the outcomes of two successive checks.

        A blacklist on either side wins; two unspecified outcomes stay
        unspecified; anything else is whitelisted.
        """
        if self is ElementState.BLACKLISTED or other is ElementState.BLACKLISTED:
            return ElementState.BLACKLISTED
        if self is ElementState.NOT_SPECIFIED and other is ElementState.NOT_SPECIFIED:
            return ElementState.NOT_SPECIFIED
        return ElementState.WHITELISTED

    @property
    def is_whitelisted(self) -> bool:
        return self is ElementState.WHITELISTED


class NameRules:
    """Tag-name rules: ``name -> keep``."""

    def __init__(self, items: Optional[Dict[str, bool]] = None):
        self.items: Dict[str, bool] = dict(items) if items else {}

    @property
    def has_whitelist(self) -> bool:
        return any(self.items.values())

    def push(self, name: str, keep: bool) -> 'NameRules':
        """Return a copy with the rule for ``name`` set."""
        items = dict(self.items)
        items.pop(name, None)
        items[name] = keep
        return NameRules(items)

    def check(self, name: str) -> ElementState:
        """
        Check a tag name.

        A name missing from the rules is blacklisted as soon as one name is
        whitelisted, since the whitelist then lists every wanted name.
        """
        keep = self.items.get(name)
        if keep is None:
            return ElementState.BLACKLISTED if self.has_whitelist else ElementState.NOT_SPECIFIED
        return ElementState.WHITELISTED if keep else ElementState.BLACKLISTED

    def is_blacklisted(self, name: str) -> bool:
        return self.items.get(name) is False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NameRules) and self.items == other.items

    def __repr__(self) -> str:
        return f"NameRules({self.items!r})"


class AttributeRules:
    """
    Attribute rules: ``name -> (value, keep)``.

    A rule whose value is None matches any attribute with that name, whether
    or not it has a value. Otherwise the value must be equal.
    """

    def __init__(self, items: Optional[Dict[str, Tuple[Optional[str], bool]]] = None):
        self.items: Dict[str, Tuple[Optional[str], bool]] = dict(items) if items else {}

    @property
    def has_whitelist(self) -> bool:
        return any(keep for _, keep in self.items.values())

    def push(self, name: str, value: Optional[str], keep: bool) -> 'AttributeRules':
        """Return a copy with the rule for ``name`` set."""
        items = dict(self.items)
        items.pop(name, None)
        items[name] = (value, keep)
        return AttributeRules(items)

    def _hits(self, header: TagHeader) -> Iterator[Tuple[bool, bool]]:
        for name, (value, keep) in self.items.items():
            yield header.has_attribute(name, value), keep

    def check(self, header: TagHeader) -> ElementState:
        """
        Check the attributes of a tag.

        Returns:
            BLACKLISTED if a blacklisted attribute is present or a whitelisted
            one is missing, WHITELISTED if whitelisted attributes exist and
            are all present, NOT_SPECIFIED otherwise
        """
        state = ElementState.NOT_SPECIFIED
        for present, keep in self._hits(header):
            if present != keep:
                return ElementState.BLACKLISTED
            if present:
                state = ElementState.WHITELISTED
        return state

    def is_blacklisted(self, header: TagHeader) -> bool:
        return any(present and not keep for present, keep in self._hits(header))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AttributeRules) and self.items == other.items

    def __repr__(self) -> str:
        return f"AttributeRules({self.items!r})"
