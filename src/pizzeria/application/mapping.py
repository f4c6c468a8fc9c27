"""Domain -> DTO mapping shared by the order use cases."""

from __future__ import annotations

from datetime import datetime

from pizzeria.application.dto import OrderDTO, OrderLineDTO
from pizzeria.domain.model.order import Order


def order_to_dto(order: Order, now: datetime) -> OrderDTO:
    following = order.status.next
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_name=order.customer_name,
        phone=order.phone,
        address=order.address,
        notes=order.notes,
        status=order.status.value,
        priority=order.priority.value,
        items=[
            OrderLineDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                size=item.size,
                crust=item.crust,
                toppings=item.toppings,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at,
        elapsed=order.elapsed(now),
        next_status=following.value if following else None,
    )
