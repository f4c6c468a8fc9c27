"""Integration tests for order tracking."""

from datetime import timedelta

from pizzeria.application.dto import CartItemSpec, CheckoutForm
from pizzeria.application.build_cart import BuildCartHandler
from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.track_order import TrackOrderHandler
from pizzeria.domain.service.service_area import CampusServiceArea
from tests.fakes import FakeClock, FakeOrderRepository, FakeProductRepository


def _place(order_repo: FakeOrderRepository, clock: FakeClock) -> str:
    cart = BuildCartHandler(FakeProductRepository()).handle([CartItemSpec("Coca Cola", 2)])
    form = CheckoutForm(name="Luis", phone="378-000-0000", address="Biblioteca")
    return PlaceOrderHandler(order_repo, CampusServiceArea(), clock).handle(form, cart).id


class TestTrackOrder:

    def test_found(self):
        order_repo, clock = FakeOrderRepository(), FakeClock()
        order_id = _place(order_repo, clock)
        clock.advance(minutes=12)

        dto = TrackOrderHandler(order_repo, clock).handle(order_id)
        assert dto.status == "pending"
        assert dto.next_status == "confirmed"
        assert dto.total == "$50.00"
        assert dto.elapsed == timedelta(minutes=12)

    def test_surrounding_whitespace_ignored(self):
        order_repo, clock = FakeOrderRepository(), FakeClock()
        order_id = _place(order_repo, clock)
        assert TrackOrderHandler(order_repo, clock).handle(f" {order_id} ") is not None

    def test_repeated_reads_are_equal(self):
        order_repo, clock = FakeOrderRepository(), FakeClock()
        order_id = _place(order_repo, clock)
        handler = TrackOrderHandler(order_repo, clock)
        assert handler.handle(order_id) == handler.handle(order_id)

    def test_unknown_id_is_none(self):
        assert TrackOrderHandler(FakeOrderRepository()).handle("missing-id") is None
