"""Application service: Quote Item use case (query)."""

from __future__ import annotations

from pizzeria.application.build_cart import BuildCartHandler
from pizzeria.application.dto import CartItemSpec, QuoteDTO
from pizzeria.domain.repository.product_repository import ProductRepository
from pizzeria.domain.service.pricing import compute_line_price


class QuoteItemHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._build_cart = BuildCartHandler(product_repo)

    def handle(self, spec: CartItemSpec) -> QuoteDTO:
        """Price one configured item, resolving options as checkout would."""
        line = self._build_cart.handle([spec]).lines[0]
        return QuoteDTO(
            product_name=line.product.name,
            size=line.size,
            toppings=tuple(sorted(line.toppings)),
            quantity=line.quantity,
            unit_price=str(line.unit_price),
            total=str(
                compute_line_price(line.product, line.size, line.toppings, line.quantity)
            ),
        )
