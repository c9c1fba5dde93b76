"""Selector model: an immutable, chainable CSS selector value."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cssbuilder.errors import OrderViolationError, RepeatedCategoryError
from cssbuilder.model.category import Category

__all__ = ["Selector"]

log = logging.getLogger("cssbuilder")


@dataclass(frozen=True)
class Selector:
    """A CSS selector built fragment by fragment.

    Every extension method returns a new Selector; the receiver is never
    modified, so a partial chain can be reused as the base of several
    selectors.

    Attributes:
        categories: Fragment categories applied so far, in order. Empty for
            the result of :meth:`combine`.
        rendered: The selector text accumulated so far.
    """

    categories: tuple[Category, ...] = ()
    rendered: str = ""

    @classmethod
    def start(cls, category: Category, value: str) -> Selector:
        """Begin a new chain with a single fragment."""
        return cls(categories=(category,), rendered=category.render(value))

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.extend(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.extend(Category.ID, value)

    def class_(self, value: str) -> Selector:
        return self.extend(Category.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append ``[value]``; *value* is the raw bracket contents."""
        return self.extend(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.extend(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.extend(Category.PSEUDO_ELEMENT, value)

    # --- combination ----------------------------------------------------------

    def combine(self, combinator: str, other: Selector) -> Selector:
        """Join this selector and *other* with *combinator*.

        The combinator is inserted verbatim between single spaces, so the
        descendant combinator ``" "`` yields three spaces. The result has no
        category history: a fragment appended to it starts a fresh chain.
        """
        rendered = " ".join((self.rendered, combinator, other.rendered))
        log.debug("combined %r %r %r", self.rendered, combinator, other.rendered)
        return Selector(categories=(), rendered=rendered)

    def stringify(self) -> str:
        return self.rendered

    def __str__(self) -> str:
        return self.rendered

    # --- validation -----------------------------------------------------------

    @property
    def highest_rank(self) -> int:
        """Highest category rank already applied, or -1 for an empty history."""
        return max((c.rank for c in self.categories), default=-1)

    def extend(self, category: Category, value: str) -> Selector:
        """Append a fragment of *category*, enforcing order and uniqueness."""
        if category.unique and category in self.categories:
            log.debug("rejected repeated %s in %r", category.value, self.rendered)
            raise RepeatedCategoryError(category)
        if self.highest_rank > category.rank:
            log.debug("rejected out-of-order %s in %r", category.value, self.rendered)
            raise OrderViolationError(category)
        return Selector(
            categories=self.categories + (category,),
            rendered=self.rendered + category.render(value),
        )
