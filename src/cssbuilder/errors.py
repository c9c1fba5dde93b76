"""Error types raised when a selector chain breaks the fragment grammar."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model.category import Category

REPEATED_CATEGORY_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_VIOLATION_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for invalid selector chains."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class RepeatedCategoryError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(REPEATED_CATEGORY_MESSAGE, category=category)


class OrderViolationError(SelectorError):
    """A fragment was appended after a category that must follow it."""

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(ORDER_VIOLATION_MESSAGE, category=category)
