"""CLI commands for customers: placing and tracking orders."""

from __future__ import annotations

import click

from pizzeria.application.build_cart import BuildCartHandler
from pizzeria.application.dto import CheckoutForm, OrderDTO
from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.track_order import TrackOrderHandler
from pizzeria.domain.exceptions import (
    DomainException,
    OutOfServiceAreaError,
    StorageUnavailable,
)
from pizzeria.domain.model.order import OrderPriority
from pizzeria.domain.service.service_area import estimate_delivery_minutes, format_address
from pizzeria.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    service_area,
)
from pizzeria.infrastructure.cli.parsing import parse_item
from pizzeria.infrastructure.cli.presentation import (
    progress_bar,
    status_eta,
    status_label,
)

OUT_OF_AREA_MESSAGE = (
    "Sorry, that address is outside our delivery area "
    "(Centro Universitario de los Altos)."
)
GENERIC_FAILURE_MESSAGE = "Could not place the order. Please try again."


def _display_items(dto: OrderDTO) -> None:
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
        details = [d for d in (item.size, item.crust) if d]
        if item.toppings:
            details.append("+ " + ", ".join(item.toppings))
        if details:
            click.echo(f"    {' / '.join(details)}")
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Order Total':<35} {dto.total:>20}")


@click.command("place")
@click.option("--name", default="", help="Customer name.")
@click.option("--phone", default="", help="Contact phone.")
@click.option("--address", default="", help="Delivery address on campus.")
@click.option("--notes", default=None, help="Notes for the kitchen.")
@click.option(
    "--priority",
    type=click.Choice([p.value for p in OrderPriority]),
    default=OrderPriority.NORMAL.value,
    show_default=True,
)
@click.option(
    "--item",
    "items",
    multiple=True,
    help="Item as 'Name[:Qty][;size=..][;crust=..][;toppings=A,B]'. Repeatable.",
)
def order_place(
    name: str,
    phone: str,
    address: str,
    notes: str | None,
    priority: str,
    items: tuple[str, ...],
) -> None:
    """Place a delivery order."""
    specs = [parse_item(raw) for raw in items]

    try:
        cart = BuildCartHandler(product_repo=product_repository()).handle(specs)
        handler = PlaceOrderHandler(
            order_repo=order_repository(),
            service_area=service_area(),
        )
        dto = handler.handle(
            CheckoutForm(
                name=name, phone=phone, address=address, notes=notes, priority=priority
            ),
            cart,
        )
    except OutOfServiceAreaError:
        raise click.ClickException(OUT_OF_AREA_MESSAGE)
    except StorageUnavailable:
        raise click.ClickException(GENERIC_FAILURE_MESSAGE)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    eta = estimate_delivery_minutes(dto.address)
    click.echo(f"Order {dto.id} placed  (status={dto.status})")
    click.echo(f"Deliver to: {format_address(dto.address)}")
    click.echo(f"Estimated delivery: {eta} min")
    click.echo()
    _display_items(dto)


@click.command("track")
@click.option("--id", "order_id", required=True, help="Order ID to track.")
def order_track(order_id: str) -> None:
    """Show the current status of an order."""
    handler = TrackOrderHandler(order_repo=order_repository())
    dto = handler.handle(order_id)
    if dto is None:
        raise click.ClickException(f"Order {order_id} not found")

    click.echo(f"Order {dto.id}  {status_label(dto.status)}")
    click.echo(f"  {progress_bar(dto.status)}")
    click.echo(f"  Estimated time: {status_eta(dto.status)}")
    click.echo(f"Customer: {dto.customer_name}  ({dto.phone})")
    click.echo(f"Address:  {format_address(dto.address)}")
    click.echo(f"Placed:   {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    _display_items(dto)
