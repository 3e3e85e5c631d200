"""
Filter builder.

A Filter is built with chained calls and never mutated afterwards: every
builder method returns a new Filter.

Examples:
    Filter().tag_name("a")                      # every <a> tag and its content
    Filter().attribute_value("id", "title")     # the element with id "title"
    Filter().tag_name("li").depth(1)            # <li> tags with their parent list
    Filter().comment(False).doctype(False)      # whole tree without comments and doctypes
"""

from typing import Optional

from ..dom.attr import TagHeader
from .node_kinds import NodeKindFilter
from .rules import AttributeRules, ElementState, NameRules


class Filter:
    """
    Selection rules: tag-name and attribute allow/deny rules, node kind
    toggles and the ancestor depth.

    Without any whitelist rule (no ``tag_name``, ``attribute_name`` or
    ``attribute_value`` call) the filter is in pass-through mode: every tag
    that is not explicitly blacklisted is kept. ``no_tags()`` turns
    pass-through off.
    """

    def __init__(self):
        self._names = NameRules()
        self._attributes = AttributeRules()
        self._kinds = NodeKindFilter()
        self._depth = 0
        self._tags = True

    def _replace(self, **changes) -> 'Filter':
        copy = Filter.__new__(Filter)
        copy.__dict__.update(self.__dict__)
        for key, value in changes.items():
            setattr(copy, f"_{key}", value)
        return copy

    # Tag and attribute rules

    def tag_name(self, name: str) -> 'Filter':
        """Select tags named ``name``."""
        return self._replace(names=self._names.push(name, True))

    def except_tag_name(self, name: str) -> 'Filter':
        """Drop tags named ``name``, with their content."""
        return self._replace(names=self._names.push(name, False))

    def attribute_name(self, name: str) -> 'Filter':
        """
        Select tags carrying an attribute named ``name``.

        Matches ``enabled`` in ``<button enabled>`` as well as
        ``<button enabled="yes">``.
        """
        return self._replace(attributes=self._attributes.push(name, None, True))

    def except_attribute_name(self, name: str) -> 'Filter':
        """Drop tags carrying an attribute named ``name``."""
        return self._replace(attributes=self._attributes.push(name, None, False))

    def attribute_value(self, name: str, value: str) -> 'Filter':
        """Select tags whose attribute ``name`` equals ``value``."""
        return self._replace(attributes=self._attributes.push(name, value, True))

    def except_attribute_value(self, name: str, value: str) -> 'Filter':
        """Drop tags whose attribute ``name`` equals ``value``."""
        return self._replace(attributes=self._attributes.push(name, value, False))

    def depth(self, depth: int) -> 'Filter':
        """
        Keep the ancestors of a selected tag up to ``depth`` generations.

        With depth 0 only the selected tag is kept; with depth 1 its parent
        and all of the parent's content are kept too, and so on.

        Raises:
            ValueError: If ``depth`` is negative
        """
        if depth < 0:
            raise ValueError(f"Depth must be positive, got {depth}")
        return self._replace(depth=depth)

    def no_tags(self) -> 'Filter':
        return self.tags(False)

    def tags(self, keep: bool) -> 'Filter':
        """Whether tags are kept when no tag or attribute is selected."""
        return self._replace(tags=keep)

    # Node kinds

    def comment(self, keep: bool) -> 'Filter':
        return self._replace(kinds=self._kinds.set("comment", keep))

    def doctype(self, keep: bool) -> 'Filter':
        return self._replace(kinds=self._kinds.set("doctype", keep))

    def text(self, keep: bool) -> 'Filter':
        return self._replace(kinds=self._kinds.set("text", keep))

    def all(self, keep: bool) -> 'Filter':
        """Set comments, doctypes and text at once."""
        return self._replace(kinds=self._kinds.set_all(keep))

    def none_except_comment(self) -> 'Filter':
        return self._replace(kinds=self._kinds.set_only("comment", True))

    def none_except_doctype(self) -> 'Filter':
        return self._replace(kinds=self._kinds.set_only("doctype", True))

    def none_except_text(self) -> 'Filter':
        return self._replace(kinds=self._kinds.set_only("text", True))

    def all_except_comment(self) -> 'Filter':
        return self._replace(kinds=self._kinds.set_only("comment", False))

    def all_except_doctype(self) -> 'Filter':
        return self._replace(kinds=self._kinds.set_only("doctype", False))

    def all_except_text(self) -> 'Filter':
        return self._replace(kinds=self._kinds.set_only("text", False))

    # Predicates used by the selection engine

    @property
    def as_depth(self) -> int:
        return self._depth

    @property
    def has_whitelist(self) -> bool:
        return self._names.has_whitelist or self._attributes.has_whitelist

    @property
    def pass_through(self) -> bool:
        return self._tags and not self.has_whitelist

    def tag_state(self, header: TagHeader) -> ElementState:
        return self._names.check(header.name).combine(self._attributes.check(header))

    def tag_explicitly_allowed(self, header: TagHeader) -> bool:
        """Whether the tag is selected by a whitelist rule and no blacklist rule."""
        return self.tag_state(header).is_whitelisted

    def tag_explicitly_blacklisted(self, header: TagHeader) -> bool:
        """Whether an ``except_*`` rule hits the tag."""
        return self._names.is_blacklisted(header.name) or self._attributes.is_blacklisted(header)

    def tag_allowed(self, header: TagHeader) -> bool:
        """Whether the tag is kept, with its content, by the heavy pass."""
        if self.has_whitelist:
            return self.tag_explicitly_allowed(header)
        return self._tags and not self.tag_explicitly_blacklisted(header)

    def kind_allowed(self, kind: str) -> bool:
        """Effective toggle for ``kind``, used inside a kept subtree."""
        return self._kinds.allowed(kind)

    def kind_kept_outside(self, kind: str) -> bool:
        """Whether a ``kind`` node outside any kept subtree survives."""
        if kind == "text":
            return self.pass_through and self._kinds.allowed(kind)
        if self._kinds.explicit(kind) is True:
            return True
        return self.pass_through and self._kinds.allowed(kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        parts = []
        if self._names.items:
            parts.append(f"names={self._names.items!r}")
        if self._attributes.items:
            parts.append(f"attributes={self._attributes.items!r}")
        parts.append(f"depth={self._depth}")
        if not self._tags:
            parts.append("tags=False")
        parts.append(repr(self._kinds))
        return f"Filter({', '.join(parts)})"
