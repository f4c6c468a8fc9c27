"""Application service: Kitchen Board use case (query).

The board lists orders for the kitchen, optionally filtered:

* ``all``     — every order
* ``active``  — everything not yet delivered
* a status    — only orders in that status, e.g. ``baking``
"""

from __future__ import annotations

from pizzeria.application.clock import Clock, utc_now
from pizzeria.application.dto import KitchenBoardDTO
from pizzeria.application.mapping import order_to_dto
from pizzeria.domain.model.order import Order, OrderStatus
from pizzeria.domain.repository.order_repository import OrderRepository

FILTER_ALL = "all"
FILTER_ACTIVE = "active"
FILTERS: tuple[str, ...] = (FILTER_ALL, FILTER_ACTIVE) + tuple(s.value for s in OrderStatus)


class KitchenBoardHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock = utc_now) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, filter_by: str = FILTER_ALL) -> KitchenBoardDTO:
        orders = self._order_repo.list_all()
        now = self._clock()
        return KitchenBoardDTO(
            orders=[order_to_dto(o, now) for o in orders if self._matches(o, filter_by)],
            active_count=sum(1 for o in orders if o.is_active),
            delivered_count=sum(1 for o in orders if not o.is_active),
        )

    @staticmethod
    def _matches(order: Order, filter_by: str) -> bool:
        if filter_by == FILTER_ALL:
            return True
        if filter_by == FILTER_ACTIVE:
            return order.is_active
        return order.status is OrderStatus.parse(filter_by)
