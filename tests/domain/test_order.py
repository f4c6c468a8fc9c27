"""Unit tests for the Order aggregate and its business rules."""

from datetime import datetime, timedelta, timezone

import pytest

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.cart import Cart
from pizzeria.domain.model.order import (
    Order,
    OrderLine,
    OrderPriority,
    OrderStatus,
)
from pizzeria.domain.model.product import DEFAULT_MENU
from pizzeria.domain.model.value_objects import Money, Quantity


def _make_line(name: str = "Pizza Margherita", qty: int = 1, price: str = "120") -> OrderLine:
    """Helper to build a valid line item."""
    return OrderLine(
        product_id="1",
        product_name=name,
        quantity=Quantity(qty),
        unit_price=Money.of(price),
    )


def _make_order(**overrides) -> Order:
    fields = dict(
        customer_name="Ana",
        phone="378-111-2222",
        address="Edificio C, salón 4",
        items=[_make_line()],
    )
    fields.update(overrides)
    return Order.create(**fields)


class TestOrderCreation:

    def test_happy_path(self):
        order = _make_order(notes="  sin cebolla ")
        assert order.id is None  # assigned by repository
        assert order.status is OrderStatus.PENDING
        assert order.priority is OrderPriority.NORMAL
        assert order.notes == "sin cebolla"

    def test_total_is_sum_of_line_totals(self):
        order = _make_order(items=[_make_line(qty=2, price="195"), _make_line(qty=3, price="25")])
        assert order.total == Money.of("465")

    @pytest.mark.parametrize("field", ["customer_name", "phone", "address"])
    def test_required_fields(self, field):
        with pytest.raises(ValidationError, match="Missing required field"):
            _make_order(**{field: "   "})

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _make_order(items=[])


class TestOrderLineSnapshot:

    def test_copied_from_cart_line(self):
        cart = Cart()
        cart.add(DEFAULT_MENU[0], size="Mediana (25cm)", toppings=["Piña", "Jamón"], quantity=2)
        line = OrderLine.from_cart_line(cart.lines[0])

        assert line.toppings == ("Jamón", "Piña")
        assert line.unit_price == Money.of("205")
        assert line.line_total == Money.of("410")

        cart.set_quantity(0, 5)
        assert line.quantity.value == 2


class TestStatusChanges:

    def test_advance_walks_the_flow(self):
        order = _make_order()
        seen = [order.status]
        while order.status.next is not None:
            seen.append(order.advance())
        assert seen == list(OrderStatus)

    def test_advance_delivered_rejected(self):
        order = _make_order()
        order.update_status("delivered")
        with pytest.raises(ValidationError, match="no next status"):
            order.advance()

    def test_explicit_update_may_go_backwards(self):
        order = _make_order()
        order.update_status(OrderStatus.READY)
        order.update_status(OrderStatus.PREPARING)
        assert order.status is OrderStatus.PREPARING

    def test_mark_delivered(self):
        order = _make_order()
        order.update_status("ready")
        order.mark_delivered()
        assert order.status is OrderStatus.DELIVERED
        assert not order.is_active


class TestElapsed:

    def test_elapsed(self):
        placed = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        order = _make_order(created_at=placed)
        assert order.elapsed(placed + timedelta(minutes=75)) == timedelta(minutes=75)

    def test_elapsed_never_negative(self):
        placed = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        order = _make_order(created_at=placed)
        assert order.elapsed(placed - timedelta(minutes=3)) == timedelta(0)
