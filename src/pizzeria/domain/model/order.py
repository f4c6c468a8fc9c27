"""Order aggregate — the core of the domain.

The Order owns a snapshot of the cart lines it was placed with and moves
through a fixed kitchen flow:

    pending -> confirmed -> preparing -> baking -> ready -> delivered

Kitchen staff normally advance one step at a time, but may also set any
status directly to correct a mistake.  Direct updates are deliberately
*not* checked against the flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.cart import CartLine
from pizzeria.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    BAKING = "baking"
    READY = "ready"
    DELIVERED = "delivered"

    @property
    def next(self) -> OrderStatus | None:
        return _NEXT_STATUS.get(self)

    @property
    def is_terminal(self) -> bool:
        return self.next is None

    @classmethod
    def parse(cls, value: OrderStatus | str) -> OrderStatus:
        """Coerce a status name such as ``"ready"`` to the enum member."""
        if isinstance(value, OrderStatus):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Unknown order status '{value}' (expected one of: {allowed})"
            ) from exc


STATUS_FLOW: tuple[OrderStatus, ...] = tuple(OrderStatus)

_NEXT_STATUS: dict[OrderStatus, OrderStatus] = dict(zip(STATUS_FLOW, STATUS_FLOW[1:]))


def next_status(current: OrderStatus | str) -> OrderStatus | None:
    """Return the status that follows *current*.

    ``None`` for ``delivered`` and for anything that is not a known status.
    """
    try:
        return OrderStatus.parse(current).next
    except ValidationError:
        return None


class OrderPriority(Enum):
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


@dataclass(frozen=True)
class OrderLine:
    """Captures a cart line at checkout time.

    Holds names and the unit price rather than a product reference, so
    later menu changes never alter a placed order.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time
    size: str | None = None
    crust: str | None = None
    toppings: tuple[str, ...] = ()

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_cart_line(line: CartLine) -> OrderLine:
        return OrderLine(
            product_id=line.product.id,
            product_name=line.product.name,
            quantity=Quantity(line.quantity),
            unit_price=line.unit_price,
            size=line.size,
            crust=line.crust,
            toppings=tuple(sorted(line.toppings)),
        )


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders — it enforces the
    checkout rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    customer_name: str
    phone: str
    address: str
    items: list[OrderLine]
    notes: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    priority: OrderPriority = OrderPriority.NORMAL

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        phone: str,
        address: str,
        items: list[OrderLine],
        notes: str | None = None,
        priority: OrderPriority = OrderPriority.NORMAL,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        missing = [
            label
            for label, value in (
                ("name", customer_name),
                ("phone", phone),
                ("address", address),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")

        if not items:
            raise ValidationError("Order must contain at least one item")

        notes = notes.strip() if notes else None
        return Order(
            id=None,
            customer_name=customer_name.strip(),
            phone=phone.strip(),
            address=address.strip(),
            items=list(items),
            notes=notes or None,
            priority=priority,
            created_at=created_at or datetime.now(timezone.utc),
        )

    # --- State transitions ----------------------------------------------------

    def update_status(self, status: OrderStatus | str) -> None:
        """Set the status directly, without checking the kitchen flow."""
        self.status = OrderStatus.parse(status)

    def advance(self) -> OrderStatus:
        """Move one step along the kitchen flow and return the new status."""
        following = self.status.next
        if following is None:
            raise ValidationError(
                f"Order is already {self.status.value}; there is no next status"
            )
        self.status = following
        return following

    def mark_delivered(self) -> None:
        self.status = OrderStatus.DELIVERED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        if not self.items:
            return Money(Decimal("0.00"))
        result = Money(Decimal("0.00"), self.items[0].unit_price.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_active(self) -> bool:
        return self.status is not OrderStatus.DELIVERED

    def elapsed(self, now: datetime) -> timedelta:
        """Time since the order was placed; never negative."""
        return max(now - self.created_at, timedelta(0))
