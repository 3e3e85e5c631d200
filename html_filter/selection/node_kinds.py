"""
Per node kind toggles for comments, doctypes and text.
"""

from typing import Optional


class NodeKindFilter:
    """
    Tri-state toggle per node kind.

    Each kind is True (keep), False (drop) or None (not set). An unset kind
    is kept wherever the effective value is asked for.
    """

    KINDS = ("comment", "doctype", "text")

    def __init__(self, comment: Optional[bool] = None, doctype: Optional[bool] = None,
                 text: Optional[bool] = None):
        self.comment = comment
        self.doctype = doctype
        self.text = text

    def explicit(self, kind: str) -> Optional[bool]:
        """The value set for ``kind``, or None."""
        return getattr(self, kind)

    def allowed(self, kind: str) -> bool:
        """Effective value for ``kind``, defaulting to True."""
        value = getattr(self, kind)
        return True if value is None else value

    def set(self, kind: str, keep: bool) -> 'NodeKindFilter':
        """Return a copy with ``kind`` set to ``keep``."""
        copy = self._copy()
        setattr(copy, kind, keep)
        return copy

    def set_only(self, kind: str, keep: bool) -> 'NodeKindFilter':
        """
        Return a copy with ``kind`` set to ``keep`` and every other kind set
        to the opposite, unless it was already set.
        """
        copy = self._copy()
        for other in self.KINDS:
            if getattr(copy, other) is None:
                setattr(copy, other, not keep)
        setattr(copy, kind, keep)
        return copy

    def set_all(self, keep: bool) -> 'NodeKindFilter':
        return NodeKindFilter(keep, keep, keep)

    def _copy(self) -> 'NodeKindFilter':
        return NodeKindFilter(self.comment, self.doctype, self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeKindFilter):
            return NotImplemented
        return all(self.explicit(kind) == other.explicit(kind) for kind in self.KINDS)

    def __repr__(self) -> str:
        return f"NodeKindFilter(comment={self.comment}, doctype={self.doctype}, text={self.text})"
