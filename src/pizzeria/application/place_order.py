"""Application service: Place Order (checkout) use case.

Checks run in a fixed order and nothing is written until all pass:

1. the cart is not empty;
2. name, phone and address are filled in;
3. the address is inside the service area;
4. the order is stored (the store may raise StorageUnavailable).

The cart is emptied only after the order has been stored.
"""

from __future__ import annotations

import logging

from pizzeria.application.clock import Clock, utc_now
from pizzeria.application.dto import CheckoutForm, OrderDTO
from pizzeria.application.mapping import order_to_dto
from pizzeria.domain.exceptions import OutOfServiceAreaError, ValidationError
from pizzeria.domain.model.cart import Cart
from pizzeria.domain.model.order import Order, OrderLine, OrderPriority
from pizzeria.domain.repository.order_repository import OrderRepository
from pizzeria.domain.service.service_area import AREA_NAME, ServiceArea

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        service_area: ServiceArea,
        clock: Clock = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._service_area = service_area
        self._clock = clock

    def handle(self, form: CheckoutForm, cart: Cart) -> OrderDTO:
        if cart.is_empty:
            raise ValidationError("Cart is empty")

        try:
            priority = OrderPriority(form.priority.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown priority '{form.priority}'") from exc

        # Snapshot the lines so later cart edits never reach the order
        order = Order.create(
            customer_name=form.name,
            phone=form.phone,
            address=form.address,
            items=[OrderLine.from_cart_line(line) for line in cart.lines],
            notes=form.notes,
            priority=priority,
            created_at=self._clock(),
        )

        if not self._service_area.is_deliverable(order.address):
            raise OutOfServiceAreaError(
                f"Address is outside our delivery area ({AREA_NAME})"
            )

        stored = self._order_repo.create(order)
        cart.clear()
        logger.info("Order %s placed (total %s)", stored.id, stored.total)

        return order_to_dto(stored, self._clock())
