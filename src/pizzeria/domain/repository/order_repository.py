"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzeria.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new, collision-resistant order ID."""

    @abstractmethod
    def create(self, order: Order) -> Order:
        """Persist a new order, assigning an ID if it has none.

        Raises DuplicateOrderError if an order with the same ID is already
        stored, and StorageUnavailable if the store cannot be written.
        """

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in the order they were created."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        """Set an order's status and return the updated order.

        Returns None, without writing anything, if the ID is unknown.
        """
