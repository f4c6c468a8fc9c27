"""CLI commands for the kitchen dashboard."""

from __future__ import annotations

import time

import click

from pizzeria.application.dto import KitchenBoardDTO, OrderDTO
from pizzeria.application.kitchen_board import FILTER_ALL, FILTERS, KitchenBoardHandler
from pizzeria.application.update_order_status import UpdateOrderStatusHandler
from pizzeria.domain.exceptions import DomainException, StorageUnavailable
from pizzeria.domain.model.order import OrderStatus
from pizzeria.infrastructure.bootstrap import order_repository, settings
from pizzeria.infrastructure.cli.presentation import (
    PRIORITY_MARKERS,
    format_elapsed,
    status_label,
)


def _display_board(board: KitchenBoardDTO, filter_by: str) -> None:
    click.echo(f"Active: {board.active_count}   Delivered: {board.delivered_count}")
    click.echo()

    if not board.orders:
        if filter_by == FILTER_ALL:
            click.echo("No orders yet.")
        else:
            click.echo(f"No orders with status: {status_label(filter_by)}")
        return

    for dto in board.orders:
        _display_ticket(dto)


def _display_ticket(dto: OrderDTO) -> None:
    marker = PRIORITY_MARKERS.get(dto.priority, "")
    click.echo(
        f"{dto.id}  {status_label(dto.status):<11} {format_elapsed(dto.elapsed):>8}  {marker}"
    )
    click.echo(f"  {dto.customer_name}  {dto.phone}  {dto.address}")
    for item in dto.items:
        extras = f" + {', '.join(item.toppings)}" if item.toppings else ""
        size = f" ({item.size})" if item.size else ""
        click.echo(f"  {item.quantity} x {item.product_name}{size}{extras}")
    if dto.notes:
        click.echo(f"  Notes: {dto.notes}")
    click.echo(f"  Total: {dto.total}")
    click.echo()


def _run_update(action, order_id: str) -> OrderDTO:
    try:
        dto = action(order_id)
    except StorageUnavailable:
        raise click.ClickException("Could not update the order. Please try again.")
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if dto is None:
        raise click.ClickException(f"Order {order_id} not found")
    return dto


filter_option = click.option(
    "--filter",
    "filter_by",
    type=click.Choice(FILTERS),
    default=FILTER_ALL,
    show_default=True,
    help="Which orders to show.",
)


@click.command("board")
@filter_option
def kitchen_board(filter_by: str) -> None:
    """Show the kitchen board."""
    board = KitchenBoardHandler(order_repo=order_repository()).handle(filter_by)
    _display_board(board, filter_by)


@click.command("watch")
@filter_option
@click.option("--interval", type=float, default=None,
              help="Seconds between refreshes (defaults to PIZZERIA_REFRESH_SECONDS).")
@click.option("--iterations", type=click.IntRange(min=1), default=None,
              help="Stop after this many refreshes.")
def kitchen_watch(filter_by: str, interval: float | None, iterations: int | None) -> None:
    """Re-read and redisplay the board on a timer (Ctrl+C to stop)."""
    config = settings()
    interval = interval if interval is not None else config.refresh_seconds
    handler = KitchenBoardHandler(order_repo=order_repository(config))

    shown = 0
    try:
        while True:
            click.clear()
            _display_board(handler.handle(filter_by), filter_by)
            shown += 1
            if iterations is not None and shown >= iterations:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        pass


@click.command("advance")
@click.option("--id", "order_id", required=True, help="Order ID to advance.")
def kitchen_advance(order_id: str) -> None:
    """Move an order to its next status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())
    dto = _run_update(handler.advance, order_id)
    click.echo(f"Order {order_id} updated to: {status_label(dto.status)}")


@click.command("deliver")
@click.option("--id", "order_id", required=True, help="Order ID to mark delivered.")
def kitchen_deliver(order_id: str) -> None:
    """Mark an order as delivered."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())
    dto = _run_update(handler.mark_delivered, order_id)
    click.echo(f"Order {order_id} updated to: {status_label(dto.status)}")


@click.command("set-status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--status", required=True,
              type=click.Choice([s.value for s in OrderStatus]),
              help="Status to set; any status is allowed, for corrections.")
def kitchen_set_status(order_id: str, status: str) -> None:
    """Set an order's status directly."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())
    dto = _run_update(lambda oid: handler.set_status(oid, status), order_id)
    click.echo(f"Order {order_id} updated to: {status_label(dto.status)}")
