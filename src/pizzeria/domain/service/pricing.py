"""Domain service: line-item pricing.

    price = (base price x size multiplier + sum of topping prices) x quantity

Plain functions with no state, so they are safe to call from anywhere.
Size and topping names the product does not know are ignored: the size
falls back to a multiplier of 1 and the topping adds nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.product import (
    DEFAULT_SIZES,
    DEFAULT_TOPPINGS,
    Product,
    SizeOption,
    ToppingOption,
)
from pizzeria.domain.model.value_objects import Money

_NO_MULTIPLIER = Decimal("1")


def size_multiplier(
    product: Product,
    size_name: str | None,
    default_sizes: tuple[SizeOption, ...] = DEFAULT_SIZES,
) -> Decimal:
    for size in product.size_options(default_sizes):
        if size.name == size_name:
            return size.multiplier
    return _NO_MULTIPLIER


def toppings_price(
    product: Product,
    topping_names: Iterable[str],
    default_toppings: tuple[ToppingOption, ...] = DEFAULT_TOPPINGS,
) -> Money:
    prices = {t.name: t.price for t in product.topping_options(default_toppings)}
    total = Money.zero(product.price.currency)
    # set(): a topping is either on the pizza or not
    for name in set(topping_names):
        price = prices.get(name)
        if price is not None:
            total = total + price
    return total


def compute_line_price(
    product: Product,
    size_name: str | None,
    topping_names: Iterable[str],
    quantity: int,
    default_sizes: tuple[SizeOption, ...] = DEFAULT_SIZES,
    default_toppings: tuple[ToppingOption, ...] = DEFAULT_TOPPINGS,
) -> Money:
    """Price of *quantity* units of a configured product.

    Raises ValidationError for a quantity below 1; the caller is expected
    to remove a line rather than price it at zero.
    """
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 1:
        raise ValidationError(f"Quantity must be at least 1, got {quantity}")

    base = product.price * size_multiplier(product, size_name, default_sizes)
    extras = toppings_price(product, topping_names, default_toppings)
    return (base + extras) * quantity


def compute_unit_price(
    product: Product,
    size_name: str | None,
    topping_names: Iterable[str],
    default_sizes: tuple[SizeOption, ...] = DEFAULT_SIZES,
    default_toppings: tuple[ToppingOption, ...] = DEFAULT_TOPPINGS,
) -> Money:
    return compute_line_price(
        product, size_name, topping_names, 1, default_sizes, default_toppings
    )
