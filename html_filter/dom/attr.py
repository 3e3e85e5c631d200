"""
Attribute and tag header implementation.
This module implements the name/attribute pair found between '<' and '>'.
"""

from typing import Iterator, List, Optional


class Attribute:
    """
    Attribute of a tag.

    An attribute is either a bare name (``<button enabled>``) or a name with a
    quoted value (``<div id="blob">``). The quote style is remembered so the
    attribute serializes the way it was written.
    """

    def __init__(self, name: str, value: Optional[str] = None, double_quote: bool = True):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name, possibly prefixed (``xlink:href``)
            value: The attribute value, or None for a bare name
            double_quote: Whether the value is delimited by double quotes
        """
        self.name = name
        self.value = value
        self.double_quote = double_quote

    @property
    def prefix(self) -> Optional[str]:
        """Namespace prefix, the part before the colon."""
        if ':' in self.name:
            return self.name.split(':', 1)[0]
        return None

    @property
    def local_name(self) -> str:
        """Name without its namespace prefix."""
        if ':' in self.name:
            return self.name.split(':', 1)[1]
        return self.name

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def add_value(self, double_quote: bool) -> None:
        """
        Start a value for a bare attribute, after '=' and the opening quote.

        Args:
            double_quote: Whether the opening quote was a double quote
        """
        self.value = ""
        self.double_quote = double_quote

    def push_value(self, ch: str) -> None:
        """Append a character to the value."""
        self.value += ch

    def to_string(self) -> str:
        """Serialize the attribute with a leading space."""
        if self.value is None:
            return f" {self.name}"
        quote = '"' if self.double_quote else "'"
        return f" {self.name}={quote}{self.value}{quote}"

    def clone(self) -> 'Attribute':
        """
        Clone this attribute.

        Returns:
            A new Attribute with the same name, value and quote style
        """
        return Attribute(self.name, self.value, self.double_quote)

    def __eq__(self, other: object) -> bool:
        # Quote style is presentation only.
        if not isinstance(other, Attribute):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"


class TagHeader:
    """
    Name and ordered attribute list of a tag.

    Duplicate attributes are kept as written.
    """

    def __init__(self, name: str, attributes: Optional[List[Attribute]] = None):
        self.name = name
        self.attributes: List[Attribute] = attributes if attributes is not None else []

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

    def find_attr_value(self, name: str) -> Optional[str]:
        """
        Find the value of the first attribute with the given name.

        Args:
            name: Attribute name, including its prefix if any

        Returns:
            The value, or None if the attribute is missing or has no value
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def has_attribute(self, name: str, value: Optional[str] = None) -> bool:
        """
        Check for an attribute by name, and by value when one is given.

        Args:
            name: Attribute name
            value: Required value, or None to accept any (or no) value

        Returns:
            True if a matching attribute exists
        """
        for attr in self.attributes:
            if attr.name == name and (value is None or attr.value == value):
                return True
        return False

    def to_string(self) -> str:
        return self.name + "".join(attr.to_string() for attr in self.attributes)

    def clone(self) -> 'TagHeader':
        return TagHeader(self.name, [attr.clone() for attr in self.attributes])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagHeader):
            return NotImplemented
        return self.name == other.name and self.attributes == other.attributes

    def __repr__(self) -> str:
        return f"TagHeader({self.name!r}, {self.attributes!r})"
