"""Application service: Browse Menu use case (query).

Pizzas expose their size, crust and topping options (the product's own
or the house defaults); drinks expose none.
"""

from __future__ import annotations

from pizzeria.application.dto import MenuItemDTO, OptionDTO
from pizzeria.domain.model.product import (
    DEFAULT_CRUSTS,
    DEFAULT_SIZES,
    DEFAULT_TOPPINGS,
    Category,
    Product,
)
from pizzeria.domain.repository.product_repository import ProductRepository


class BrowseMenuHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> dict[str, list[MenuItemDTO]]:
        """Return the menu grouped by category, in category order."""
        menu: dict[str, list[MenuItemDTO]] = {}
        for category in Category:
            items = [self._to_dto(p) for p in self._product_repo.list_by_category(category)]
            if items:
                menu[category.value] = items
        return menu

    def show(self, name: str) -> MenuItemDTO | None:
        product = self._product_repo.get_by_name(name)
        return self._to_dto(product) if product is not None else None

    @staticmethod
    def _to_dto(product: Product) -> MenuItemDTO:
        if not product.is_customizable:
            return MenuItemDTO(
                id=product.id,
                name=product.name,
                description=product.description,
                category=product.category.value,
                price=str(product.price),
                customizable=False,
            )
        return MenuItemDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            category=product.category.value,
            price=str(product.price),
            customizable=True,
            sizes=[
                OptionDTO(s.name, str(product.price * s.multiplier))
                for s in product.size_options(DEFAULT_SIZES)
            ],
            crusts=list(product.crust_options(DEFAULT_CRUSTS)),
            toppings=[
                OptionDTO(t.name, f"+{t.price}")
                for t in product.topping_options(DEFAULT_TOPPINGS)
            ],
        )
