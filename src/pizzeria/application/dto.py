"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product as the customer configured it."""

    product_name: str
    quantity: int = 1
    size: str | None = None
    crust: str | None = None
    toppings: tuple[str, ...] = ()


@dataclass(frozen=True)
class CheckoutForm:
    """Input: the customer's delivery details."""

    name: str
    phone: str
    address: str
    notes: str | None = None
    priority: str = "normal"


@dataclass(frozen=True)
class QuoteDTO:
    product_name: str
    size: str | None
    toppings: tuple[str, ...]
    quantity: int
    unit_price: str
    total: str


@dataclass(frozen=True)
class OptionDTO:
    name: str
    price: str  # formatted, e.g. "$180.00" for a size or "+$15.00" for a topping


@dataclass(frozen=True)
class MenuItemDTO:
    id: str
    name: str
    description: str
    category: str
    price: str
    customizable: bool
    sizes: list[OptionDTO] = field(default_factory=list)
    crusts: list[str] = field(default_factory=list)
    toppings: list[OptionDTO] = field(default_factory=list)


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    size: str | None
    crust: str | None
    toppings: tuple[str, ...]
    unit_price: str  # formatted, e.g. "$195.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    phone: str
    address: str
    notes: str | None
    status: str
    priority: str
    items: list[OrderLineDTO]
    total: str
    created_at: datetime
    elapsed: timedelta
    next_status: str | None


@dataclass(frozen=True)
class KitchenBoardDTO:
    orders: list[OrderDTO]
    active_count: int
    delivered_count: int
