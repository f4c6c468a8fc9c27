"""Product reference data.

Products are read-only as far as ordering is concerned: the catalog
provides them, carts and orders only read them.  A product may define its
own sizes, crusts and toppings; when it does not, the house defaults below
apply.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pizzeria.domain.exceptions import ValidationError
from pizzeria.domain.model.value_objects import Money


class Category(Enum):
    TRADITIONAL = "Traditional"
    GOURMET = "Gourmet"
    DRINKS = "Drinks"


@dataclass(frozen=True)
class SizeOption:
    name: str
    multiplier: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.multiplier, Decimal) or self.multiplier <= 0:
            raise ValidationError(
                f"Size multiplier for '{self.name}' must be a positive Decimal"
            )


@dataclass(frozen=True)
class ToppingOption:
    name: str
    price: Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``sizes``, ``crusts`` and ``toppings`` are empty when the product
    relies on the house defaults.
    """

    id: str
    name: str
    description: str
    price: Money
    category: Category
    sizes: tuple[SizeOption, ...] = ()
    crusts: tuple[str, ...] = ()
    toppings: tuple[ToppingOption, ...] = ()

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.price.amount <= 0:
            raise ValidationError(
                f"Product price must be greater than zero ({self.name})"
            )

    @property
    def is_customizable(self) -> bool:
        """Pizzas open the customizer; drinks go straight to the cart."""
        return self.category is not Category.DRINKS

    def size_options(
        self, defaults: tuple[SizeOption, ...] = ()
    ) -> tuple[SizeOption, ...]:
        return self.sizes or defaults

    def crust_options(self, defaults: tuple[str, ...] = ()) -> tuple[str, ...]:
        return self.crusts or defaults

    def topping_options(
        self, defaults: tuple[ToppingOption, ...] = ()
    ) -> tuple[ToppingOption, ...]:
        return self.toppings or defaults


# ---------------------------------------------------------------------------
# House defaults
# ---------------------------------------------------------------------------

DEFAULT_SIZES: tuple[SizeOption, ...] = (
    SizeOption("Personal (20cm)", Decimal("1")),
    SizeOption("Mediana (25cm)", Decimal("1.5")),
    SizeOption("Familiar (30cm)", Decimal("2")),
)

DEFAULT_CRUSTS: tuple[str, ...] = (
    "Masa Tradicional",
    "Masa Delgada",
    "Masa Gruesa",
    "Masa Integral",
)

DEFAULT_TOPPINGS: tuple[ToppingOption, ...] = tuple(
    ToppingOption(name, Money.of(price))
    for name, price in (
        ("Pepperoni Extra", 15),
        ("Champiñones", 10),
        ("Pimientos", 8),
        ("Cebolla", 8),
        ("Aceitunas", 12),
        ("Jamón", 15),
        ("Salchicha", 15),
        ("Piña", 10),
        ("Tomate Cherry", 12),
        ("Queso Extra", 20),
        ("Jalapeños", 8),
        ("Tocino", 18),
        ("Pollo", 20),
        ("Carne Molida", 22),
        ("Anchoas", 15),
    )
)


def _menu_item(
    product_id: str, name: str, description: str, price: int, category: Category
) -> Product:
    return Product(
        id=product_id,
        name=name,
        description=description,
        price=Money.of(price),
        category=category,
    )


DEFAULT_MENU: tuple[Product, ...] = (
    _menu_item("1", "Pizza Margherita",
               "Salsa de tomate, mozzarella fresca, albahaca", 120, Category.TRADITIONAL),
    _menu_item("2", "Pizza Pepperoni",
               "Salsa de tomate, mozzarella, pepperoni", 140, Category.TRADITIONAL),
    _menu_item("3", "Pizza Hawaiana",
               "Salsa de tomate, mozzarella, jamón, piña", 150, Category.TRADITIONAL),
    _menu_item("4", "Pizza Mexicana",
               "Salsa de tomate, mozzarella, jalapeños, chorizo, cebolla", 160,
               Category.TRADITIONAL),
    _menu_item("5", "Pizza Cuatro Quesos",
               "Mozzarella, parmesano, gorgonzola, queso de cabra", 180, Category.GOURMET),
    _menu_item("6", "Pizza Prosciutto",
               "Salsa blanca, mozzarella, prosciutto, rúcula, tomate cherry", 220,
               Category.GOURMET),
    _menu_item("7", "Pizza Trufa",
               "Salsa blanca, mozzarella, champiñones, aceite de trufa", 250,
               Category.GOURMET),
    _menu_item("8", "Pizza BBQ",
               "Salsa BBQ, mozzarella, pollo, cebolla morada, cilantro", 190,
               Category.GOURMET),
    _menu_item("9", "Coca Cola", "Refresco de cola 355ml", 25, Category.DRINKS),
    _menu_item("10", "Agua Natural", "Agua purificada 500ml", 15, Category.DRINKS),
    _menu_item("11", "Jugo de Naranja", "Jugo natural de naranja 300ml", 30,
               Category.DRINKS),
)
