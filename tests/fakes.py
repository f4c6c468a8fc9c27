"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy
from datetime import datetime, timedelta, timezone

from pizzeria.domain.exceptions import DuplicateOrderError, StorageUnavailable
from pizzeria.domain.model.order import Order, OrderStatus
from pizzeria.domain.model.product import DEFAULT_MENU, Product
from pizzeria.domain.repository.order_repository import OrderRepository
from pizzeria.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, available: bool = True) -> None:
        self._store: dict[str, Order] = {}
        self._next_id = 1
        self.available = available

    def next_id(self) -> str:
        order_id = f"order-{self._next_id}"
        self._next_id += 1
        return order_id

    def create(self, order: Order) -> Order:
        if not self.available:
            raise StorageUnavailable("Order storage is unavailable")
        if order.id is None:
            order.id = self.next_id()
        elif order.id in self._store:
            raise DuplicateOrderError(f"Order {order.id} already exists")
        self._store[order.id] = copy.deepcopy(order)
        return order

    def list_all(self) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.values()]

    def get_by_id(self, order_id: str) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        order = self._store.get(order_id)
        if order is None:
            return None
        if not self.available:
            raise StorageUnavailable("Order storage is unavailable")
        order.update_status(status)
        return copy.deepcopy(order)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | tuple[Product, ...] = DEFAULT_MENU) -> None:
        self._products = list(products)

    def list_all(self) -> list[Product]:
        return list(self._products)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 13, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)
