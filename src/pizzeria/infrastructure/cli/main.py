from datetime import datetime

import click

from pizzeria.domain.service.service_area import (
    AREA_NAME,
    estimate_delivery_minutes,
    format_address,
    is_delivery_hours,
)
from pizzeria.infrastructure.bootstrap import service_area
from pizzeria.infrastructure.cli.kitchen_commands import (
    kitchen_advance,
    kitchen_board,
    kitchen_deliver,
    kitchen_set_status,
    kitchen_watch,
)
from pizzeria.infrastructure.cli.menu_commands import menu_list, menu_quote, menu_show
from pizzeria.infrastructure.cli.order_commands import order_place, order_track
from pizzeria.infrastructure.config import (
    ConfigurationError,
    configure_logging,
    load_settings,
)


@click.group()
def cli() -> None:
    """Pizzeria — campus pizza ordering"""


@cli.group()
def menu() -> None:
    """Browse the menu."""


@cli.group()
def order() -> None:
    """Place and track orders."""


@cli.group()
def kitchen() -> None:
    """Kitchen dashboard."""


@cli.group()
def area() -> None:
    """Delivery area."""


@area.command("check")
@click.argument("address")
def area_check(address: str) -> None:
    """Check whether we deliver to ADDRESS."""
    if not service_area().is_deliverable(address):
        raise click.ClickException(f"Outside the delivery area ({AREA_NAME}).")
    click.echo(f"We deliver to {format_address(address)}")
    click.echo(f"Estimated delivery: {estimate_delivery_minutes(address)} min")
    if not is_delivery_hours(datetime.now()):
        click.echo("Delivery is closed right now; it opens at 11:00.")


# Register subcommands
menu.add_command(menu_list)
menu.add_command(menu_show)
menu.add_command(menu_quote)
order.add_command(order_place)
order.add_command(order_track)
kitchen.add_command(kitchen_board)
kitchen.add_command(kitchen_watch)
kitchen.add_command(kitchen_advance)
kitchen.add_command(kitchen_deliver)
kitchen.add_command(kitchen_set_status)


def main() -> None:
    """Console entry point: configure logging once, then run the CLI."""
    try:
        configure_logging(load_settings())
    except ConfigurationError as exc:
        raise SystemExit(f"Configuration error: {exc}")
    cli()
