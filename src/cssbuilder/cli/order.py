"""CLI command: cssbuilder order -- show the fixed fragment order."""

from __future__ import annotations

import click

from cssbuilder.model.category import Category


@click.command()
def order() -> None:
    """List fragment categories in the order they must appear."""
    for category in Category:
        repeat = "once" if category.unique else "repeatable"
        click.echo(
            f"{category.rank + 1}. {category.value:<15} {category.render('x'):<6} {repeat}"
        )
