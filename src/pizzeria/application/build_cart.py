"""Application service: Build Cart use case.

Resolves what the customer asked for against the catalog.  Option names
are matched case-insensitively and stored under the menu's spelling;
an option the product does not offer is rejected here, since the pricing
engine would silently ignore it.
"""

from __future__ import annotations

from collections.abc import Iterable

from pizzeria.application.dto import CartItemSpec
from pizzeria.domain.exceptions import EntityNotFoundError, ValidationError
from pizzeria.domain.model.cart import Cart
from pizzeria.domain.model.product import (
    DEFAULT_CRUSTS,
    DEFAULT_SIZES,
    DEFAULT_TOPPINGS,
    Product,
)
from pizzeria.domain.repository.product_repository import ProductRepository


class BuildCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, item_specs: list[CartItemSpec], cart: Cart | None = None) -> Cart:
        """Add every spec to *cart* (a new one if omitted) and return it."""
        cart = cart if cart is not None else Cart()
        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")
            size, crust, toppings = self._resolve_options(product, spec)
            cart.add(
                product,
                size=size,
                crust=crust,
                toppings=toppings,
                quantity=spec.quantity,
            )
        return cart

    @staticmethod
    def _resolve_options(
        product: Product, spec: CartItemSpec
    ) -> tuple[str | None, str | None, tuple[str, ...]]:
        if not product.is_customizable:
            if spec.size or spec.crust or spec.toppings:
                raise ValidationError(f"{product.name} cannot be customized")
            return None, None, ()

        sizes = [s.name for s in product.size_options(DEFAULT_SIZES)]
        crusts = list(product.crust_options(DEFAULT_CRUSTS))
        toppings = [t.name for t in product.topping_options(DEFAULT_TOPPINGS)]

        # Unspecified size/crust default to the first option, as the menu does
        size = _match(spec.size, sizes, "size", product) if spec.size else sizes[0]
        crust = _match(spec.crust, crusts, "crust", product) if spec.crust else crusts[0]
        chosen = tuple(_match(t, toppings, "topping", product) for t in spec.toppings)
        return size, crust, chosen


def _match(wanted: str, options: Iterable[str], kind: str, product: Product) -> str:
    key = wanted.strip().lower()
    for option in options:
        if option.lower() == key:
            return option
    raise ValidationError(f"{product.name} has no {kind} '{wanted}'")
