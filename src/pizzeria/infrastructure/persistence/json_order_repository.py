"""JSON-file-backed implementation of OrderRepository.

The whole collection lives in one file and is rewritten on every change.
Writes go to a temporary file that is then renamed over the original, so
a failed write never leaves a half-written file behind.

Reading is fail-open: a missing, unreadable or corrupt file is treated as
"no orders" rather than an error.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from pizzeria.domain.exceptions import (
    DomainException,
    DuplicateOrderError,
    StorageUnavailable,
)
from pizzeria.domain.model.order import Order, OrderLine, OrderPriority, OrderStatus
from pizzeria.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from pizzeria.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid.uuid4().hex

    def create(self, order: Order) -> Order:
        orders = self._load()

        if order.id is None:
            order.id = self.next_id()
        elif any(o.id == order.id for o in orders):
            raise DuplicateOrderError(f"Order {order.id} already exists")

        orders.append(order)
        self._persist(orders)
        return order

    def list_all(self) -> list[Order]:
        return self._load()

    def get_by_id(self, order_id: str) -> Order | None:
        for order in self._load():
            if order.id == order_id:
                return order
        return None

    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        orders = self._load()
        for order in orders:
            if order.id == order_id:
                order.update_status(status)
                self._persist(orders)
                return order
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "phone": order.phone,
            "address": order.address,
            "notes": order.notes,
            "status": order.status.value,
            "priority": order.priority.value,
            "created_at": order.created_at.isoformat(),
            "total": str(order.total.amount),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "size": item.size,
                    "crust": item.crust,
                    "toppings": list(item.toppings),
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLine(
                product_id=str(i["product_id"]),
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(
                    Decimal(str(i["unit_price"])), i.get("currency", DEFAULT_CURRENCY)
                ),
                size=i.get("size"),
                crust=i.get("crust"),
                toppings=tuple(i.get("toppings") or ()),
            )
            for i in raw["items"]
        ]
        return Order(
            id=str(raw["id"]),
            customer_name=raw["customer_name"],
            phone=raw["phone"],
            address=raw["address"],
            notes=raw.get("notes"),
            items=items,
            status=OrderStatus(raw["status"]),
            priority=OrderPriority(raw.get("priority") or OrderPriority.NORMAL.value),
            created_at=_parse_timestamp(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[Order]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.warning("Order store %s unreadable, treating as empty: %s",
                           self._file_path, exc)
            return []

        try:
            return [self._to_domain(r) for r in raw]
        except (KeyError, TypeError, ValueError, ArithmeticError, DomainException) as exc:
            logger.warning("Order store %s is corrupt, treating as empty: %s",
                           self._file_path, exc)
            return []

    def _persist(self, orders: list[Order]) -> None:
        payload = json.dumps([self._to_raw(o) for o in orders], indent=2,
                             ensure_ascii=False) + "\n"
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".orders-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.error("Could not write order store %s: %s", self._file_path, exc)
            raise StorageUnavailable("Order storage is unavailable") from exc


def _parse_timestamp(value: str) -> datetime:
    # Hand-edited records may lack an offset; stored times are UTC.
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
