"""cssbuilder: fluent, immutable CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from cssbuilder.builder import SelectorBuilder, css_selector_builder
from cssbuilder.errors import (
    ORDER_VIOLATION_MESSAGE,
    REPEATED_CATEGORY_MESSAGE,
    OrderViolationError,
    RepeatedCategoryError,
    SelectorError,
)
from cssbuilder.model import Category, Selector
from cssbuilder.objects import Rectangle, from_json, get_json

__all__ = [
    "__version__",
    # Builder
    "SelectorBuilder",
    "css_selector_builder",
    # Model
    "Category",
    "Selector",
    # Errors
    "SelectorError",
    "RepeatedCategoryError",
    "OrderViolationError",
    "REPEATED_CATEGORY_MESSAGE",
    "ORDER_VIOLATION_MESSAGE",
    # Objects
    "Rectangle",
    "get_json",
    "from_json",
]
