"""Selector builder facade: entry points that start or join selector chains."""

from __future__ import annotations

from cssbuilder.model.category import Category
from cssbuilder.model.selector import Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Create :class:`Selector` chains.

    Example::

        builder = css_selector_builder
        builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        # 'a[href$=".png"]:focus'

        builder.combine(
            builder.element("div").id("main"),
            "+",
            builder.element("table").id("data"),
        ).stringify()
        # 'div#main + table#data'
    """

    def element(self, value: str) -> Selector:
        return Selector.start(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return Selector.start(Category.ID, value)

    def class_(self, value: str) -> Selector:
        return Selector.start(Category.CLASS, value)

    def attr(self, value: str) -> Selector:
        return Selector.start(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector.start(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector.start(Category.PSEUDO_ELEMENT, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join *left* and *right* with *combinator* (``" "``, ``+``, ``~``, ``>``)."""
        return left.combine(combinator, right)

    def fragment(self, category: Category, value: str) -> Selector:
        """Start a chain from a :class:`Category` chosen at runtime."""
        return Selector.start(category, value)


css_selector_builder = SelectorBuilder()
