"""Application service: Update Order Status use cases.

Three kitchen actions:

* ``set_status``     — jump straight to any status (corrections allowed,
                       the flow is not enforced);
* ``advance``        — move one step along the flow;
* ``mark_delivered`` — the "delivered" button shown for ready orders.

Each returns the updated order, or None if the ID is unknown.
"""

from __future__ import annotations

import logging

from pizzeria.application.clock import Clock, utc_now
from pizzeria.application.dto import OrderDTO
from pizzeria.application.mapping import order_to_dto
from pizzeria.domain.model.order import OrderStatus
from pizzeria.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock = utc_now) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def set_status(self, order_id: str, status: OrderStatus | str) -> OrderDTO | None:
        order_id = order_id.strip()
        target = OrderStatus.parse(status)
        order = self._order_repo.update_status(order_id, target)
        if order is None:
            logger.info("Status update for unknown order %s ignored", order_id)
            return None
        logger.info("Order %s set to %s", order_id, target.value)
        return order_to_dto(order, self._clock())

    def advance(self, order_id: str) -> OrderDTO | None:
        order = self._order_repo.get_by_id(order_id.strip())
        if order is None:
            return None
        # Domain method raises ValidationError on delivered orders
        target = order.advance()
        return self.set_status(order.id, target)

    def mark_delivered(self, order_id: str) -> OrderDTO | None:
        order = self._order_repo.get_by_id(order_id.strip())
        if order is None:
            return None
        order.mark_delivered()
        return self.set_status(order.id, order.status)
