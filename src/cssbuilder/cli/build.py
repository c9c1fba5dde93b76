"""CLI command: cssbuilder build -- assemble a selector from fragment tokens."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import css_selector_builder
from cssbuilder.errors import SelectorError
from cssbuilder.model.category import Category
from cssbuilder.model.selector import Selector

# Token kinds accepted on the command line.
KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}


def _split_chains(tokens: tuple[str, ...]) -> tuple[list[list[tuple[Category, str]]], list[str]]:
    """Split tokens into fragment chains and the combinators between them."""
    chains: list[list[tuple[Category, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        kind, sep, value = token.partition(":")
        if not sep:
            if not chains[-1]:
                raise click.BadParameter(
                    f"combinator {token!r} must sit between two selectors"
                )
            combinators.append(token)
            chains.append([])
            continue
        if kind not in KINDS:
            raise click.BadParameter(
                f"unknown fragment kind {kind!r} (expected one of: {', '.join(KINDS)})"
            )
        chains[-1].append((KINDS[kind], value))
    if not chains[-1]:
        raise click.BadParameter("selector must not end with a combinator")
    return chains, combinators


def _build_chain(fragments: list[tuple[Category, str]]) -> Selector:
    (category, value), *rest = fragments
    selector = css_selector_builder.fragment(category, value)
    for category, value in rest:
        selector = selector.extend(category, value)
    return selector


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND:VALUE tokens.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    A token without a colon is a combinator (" ", "+", "~", ">") joining the
    selector so far with the one that follows.

    Example: cssbuilder build element:div id:main + element:table
    """
    chains, combinators = _split_chains(tokens)

    try:
        result = _build_chain(chains[0])
        for combinator, fragments in zip(combinators, chains[1:]):
            result = css_selector_builder.combine(
                result, combinator, _build_chain(fragments)
            )
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.stringify())
