"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pizzeria.domain.model.product import DEFAULT_MENU
from pizzeria.domain.service.service_area import CampusServiceArea
from pizzeria.infrastructure.config import Settings, load_settings
from pizzeria.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from pizzeria.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository(config: Settings | None = None) -> JsonProductRepository:
    config = config or settings()
    # The built-in menu is served whenever products.json is missing or broken
    return JsonProductRepository(config.products_file, fallback=DEFAULT_MENU)


def order_repository(config: Settings | None = None) -> JsonOrderRepository:
    config = config or settings()
    return JsonOrderRepository(config.orders_file)


def service_area() -> CampusServiceArea:
    return CampusServiceArea()
