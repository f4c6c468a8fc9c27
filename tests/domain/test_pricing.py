"""Unit tests for line-item pricing."""

from decimal import Decimal

import pytest

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.product import (
    DEFAULT_SIZES,
    DEFAULT_TOPPINGS,
    Category,
    Product,
    SizeOption,
    ToppingOption,
)
from pizzeria.domain.model.value_objects import Money
from pizzeria.domain.service.pricing import (
    compute_line_price,
    compute_unit_price,
    size_multiplier,
)


def _pizza(**overrides) -> Product:
    fields = dict(
        id="1",
        name="Pizza Margherita",
        description="Tomate, mozzarella, albahaca",
        price=Money.of("120"),
        category=Category.TRADITIONAL,
    )
    fields.update(overrides)
    return Product(**fields)


class TestSizeMultiplier:

    @pytest.mark.parametrize("size", DEFAULT_SIZES, ids=lambda s: s.name)
    def test_default_sizes_without_toppings(self, size):
        for qty in (1, 2, 5):
            price = compute_line_price(_pizza(), size.name, [], qty)
            assert price.amount == Decimal("120") * size.multiplier * qty

    def test_product_sizes_replace_defaults(self):
        pizza = _pizza(sizes=(SizeOption("Gigante", Decimal("3")),))
        assert compute_unit_price(pizza, "Gigante", []) == Money.of("360")
        # A default size name means nothing for this product
        assert compute_unit_price(pizza, "Mediana (25cm)", []) == Money.of("120")

    def test_unknown_size_uses_multiplier_one(self):
        assert size_multiplier(_pizza(), "Colosal") == Decimal("1")

    def test_no_size_uses_multiplier_one(self):
        assert compute_unit_price(_pizza(), None, []) == Money.of("120")


class TestToppings:

    def test_each_topping_adds_its_price_times_quantity(self):
        pizza = _pizza()
        chosen: list[str] = []
        for topping in DEFAULT_TOPPINGS[:5]:
            before = compute_line_price(pizza, "Mediana (25cm)", chosen, 3)
            chosen.append(topping.name)
            after = compute_line_price(pizza, "Mediana (25cm)", chosen, 3)
            assert after.amount - before.amount == topping.price.amount * 3

    def test_unknown_topping_is_free(self):
        assert compute_unit_price(_pizza(), None, ["Caviar"]) == Money.of("120")

    def test_product_toppings_replace_defaults(self):
        pizza = _pizza(toppings=(ToppingOption("Trufa Negra", Money.of("50")),))
        assert compute_unit_price(pizza, None, ["Trufa Negra", "Jamón"]) == Money.of("170")

    def test_repeated_topping_counts_once(self):
        assert compute_unit_price(_pizza(), None, ["Jamón", "Jamón"]) == Money.of("135")


class TestLinePrice:

    def test_reference_scenario(self):
        # (120 x 1.5 + 15) x 2
        price = compute_line_price(_pizza(), "Mediana (25cm)", ["Pepperoni Extra"], 2)
        assert str(price) == "$390.00"

    def test_caller_supplied_defaults(self):
        sizes = (SizeOption("Doble", Decimal("2")),)
        toppings = (ToppingOption("Extra", Money.of("1")),)
        price = compute_line_price(_pizza(), "Doble", ["Extra"], 1, sizes, toppings)
        assert price == Money.of("241")

    @pytest.mark.parametrize("qty", [0, -1])
    def test_quantity_below_one_rejected(self, qty):
        with pytest.raises(ValidationError, match="at least 1"):
            compute_line_price(_pizza(), None, [], qty)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            compute_line_price(_pizza(), None, [], 1.5)

    def test_is_deterministic(self):
        args = (_pizza(), "Familiar (30cm)", ["Pollo", "Cebolla"], 4)
        assert compute_line_price(*args) == compute_line_price(*args)
