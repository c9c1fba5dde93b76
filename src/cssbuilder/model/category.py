"""Fragment categories of a compound CSS selector, in their fixed order."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Kind of a selector fragment.

    Declaration order is the order fragments must appear in:

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this category in the fixed order (0 = element)."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True if the category may occur at most once in a selector."""
        return self in _UNIQUE

    def render(self, value: str) -> str:
        """Return *value* in this category's CSS syntax."""
        prefix, suffix = _SYNTAX[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[Category, int] = {c: i for i, c in enumerate(Category)}

_UNIQUE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

# (prefix, suffix) wrapped around the fragment value.
_SYNTAX: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}
