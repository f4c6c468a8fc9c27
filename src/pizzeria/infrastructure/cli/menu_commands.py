"""CLI commands for browsing the menu."""

from __future__ import annotations

import click

from pizzeria.application.browse_menu import BrowseMenuHandler
from pizzeria.application.quote_item import QuoteItemHandler
from pizzeria.domain.exceptions import DomainException
from pizzeria.infrastructure.bootstrap import product_repository
from pizzeria.infrastructure.cli.parsing import parse_item


@click.command("list")
def menu_list() -> None:
    """List the menu grouped by category."""
    handler = BrowseMenuHandler(product_repo=product_repository())
    menu = handler.handle()

    if not menu:
        click.echo("No products available.")
        return

    for category, items in menu.items():
        click.echo(category)
        click.echo("-" * 48)
        for item in items:
            click.echo(f"  {item.id:<4} {item.name:<30} {item.price:>10}")
        click.echo()


@click.command("show")
@click.argument("name")
def menu_show(name: str) -> None:
    """Show a product with its size, crust and topping options."""
    handler = BrowseMenuHandler(product_repo=product_repository())
    item = handler.show(name)
    if item is None:
        raise click.ClickException(f"Product not found: '{name}'")

    click.echo(f"{item.name}  ({item.category})  {item.price}")
    click.echo(item.description)
    if not item.customizable:
        return

    click.echo()
    click.echo("Sizes:")
    for size in item.sizes:
        click.echo(f"  {size.name:<28} {size.price:>10}")
    click.echo("Crusts:")
    for crust in item.crusts:
        click.echo(f"  {crust}")
    click.echo("Toppings:")
    for topping in item.toppings:
        click.echo(f"  {topping.name:<28} {topping.price:>10}")


@click.command("quote")
@click.argument("item")
def menu_quote(item: str) -> None:
    """Price a configured item without ordering it.

    ITEM uses the same format as 'order place --item'.
    """
    handler = QuoteItemHandler(product_repo=product_repository())

    try:
        quote = handler.handle(parse_item(item))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{quote.product_name}" + (f" - {quote.size}" if quote.size else ""))
    if quote.toppings:
        click.echo(f"  + {', '.join(quote.toppings)}")
    click.echo(f"  {quote.quantity} x {quote.unit_price} = {quote.total}")
