"""JSON-file-backed, read-only product catalog.

File format — a list of products; the option lists are optional::

    [
      {
        "id": "1",
        "name": "Pizza Margherita",
        "description": "...",
        "price": "120",
        "category": "Traditional",
        "sizes": [{"name": "Chica", "multiplier": "1"}],
        "crusts": ["Masa Delgada"],
        "toppings": [{"name": "Albahaca", "price": "5"}]
      }
    ]

A missing or unreadable file yields the ``fallback`` catalog (empty unless
one is given) instead of an error.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from pizzeria.domain.exceptions import DomainException
from pizzeria.domain.model.product import Category, Product, SizeOption, ToppingOption
from pizzeria.domain.model.value_objects import DEFAULT_CURRENCY, Money
from pizzeria.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, fallback: tuple[Product, ...] = ()) -> None:
        self._file_path = file_path
        self._fallback = fallback

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug("No catalog at %s, using default products", self._file_path)
            return list(self._fallback)
        except (OSError, ValueError) as exc:
            logger.warning("Catalog %s unreadable, using default products: %s",
                           self._file_path, exc)
            return list(self._fallback)

        try:
            return [self._to_domain(item) for item in raw]
        except (KeyError, TypeError, ValueError, ArithmeticError, DomainException) as exc:
            logger.warning("Catalog %s is invalid, using default products: %s",
                           self._file_path, exc)
            return list(self._fallback)

    @staticmethod
    def _to_domain(item: dict) -> Product:
        currency = item.get("currency", DEFAULT_CURRENCY)
        return Product(
            id=str(item["id"]),
            name=item["name"],
            description=item.get("description", ""),
            price=Money(Decimal(str(item["price"])), currency),
            category=Category(item["category"]),
            sizes=tuple(
                SizeOption(s["name"], Decimal(str(s["multiplier"])))
                for s in item.get("sizes") or ()
            ),
            crusts=tuple(item.get("crusts") or ()),
            toppings=tuple(
                ToppingOption(t["name"], Money(Decimal(str(t["price"])), currency))
                for t in item.get("toppings") or ()
            ),
        )
