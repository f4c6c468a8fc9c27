"""Application service: Track Order use case (query)."""

from __future__ import annotations

from pizzeria.application.clock import Clock, utc_now
from pizzeria.application.dto import OrderDTO
from pizzeria.application.mapping import order_to_dto
from pizzeria.domain.repository.order_repository import OrderRepository


class TrackOrderHandler:

    def __init__(self, order_repo: OrderRepository, clock: Clock = utc_now) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, order_id: str) -> OrderDTO | None:
        """Return the order, or None if no order has that ID."""
        order = self._order_repo.get_by_id(order_id.strip())
        if order is None:
            return None
        return order_to_dto(order, self._clock())
