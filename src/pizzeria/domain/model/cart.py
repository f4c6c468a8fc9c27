"""Shopping cart — configured products waiting to be ordered.

The cart is plain state owned by whoever builds the order (the CLI builds
one per invocation).  Nothing here touches storage.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.product import Product
from pizzeria.domain.model.value_objects import Money
from pizzeria.domain.service.pricing import compute_unit_price


@dataclass
class CartLine:
    """One configured product in the cart.

    ``price_override`` replaces the computed unit price entirely (toppings
    included) when set.
    """

    product: Product
    size: str | None = None
    crust: str | None = None
    toppings: frozenset[str] = frozenset()
    quantity: int = 1
    price_override: Money | None = None

    @property
    def unit_price(self) -> Money:
        if self.price_override is not None:
            return self.price_override
        return compute_unit_price(self.product, self.size, self.toppings)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    def same_configuration(
        self,
        product: Product,
        size: str | None,
        crust: str | None,
        toppings: frozenset[str],
    ) -> bool:
        return (
            self.product.id == product.id
            and self.size == size
            and self.crust == crust
            and self.toppings == toppings
        )


class Cart:

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    def add(
        self,
        product: Product,
        size: str | None = None,
        crust: str | None = None,
        toppings: Iterable[str] = (),
        quantity: int = 1,
        price_override: Money | None = None,
    ) -> CartLine:
        """Add a product, merging with an identically configured line."""
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError(f"Quantity must be a positive integer, got {quantity!r}")

        chosen = frozenset(toppings)
        for line in self._lines:
            if line.same_configuration(product, size, crust, chosen):
                line.quantity += quantity
                return line

        line = CartLine(
            product=product,
            size=size,
            crust=crust,
            toppings=chosen,
            quantity=quantity,
            price_override=price_override,
        )
        self._lines.append(line)
        return line

    def set_quantity(self, index: int, quantity: int) -> None:
        """Change a line's quantity; zero removes the line."""
        self._check_index(index)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(f"Quantity must be an integer, got {quantity!r}")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if quantity == 0:
            del self._lines[index]
            return
        self._lines[index].quantity = quantity

    def remove(self, index: int) -> None:
        self._check_index(index)
        del self._lines[index]

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total(self) -> Money:
        if not self._lines:
            return Money.zero()
        result = Money.zero(self._lines[0].product.price.currency)
        for line in self._lines:
            result = result + line.line_total
        return result

    def __len__(self) -> int:
        return len(self._lines)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise ValidationError(f"No cart line at position {index}")
