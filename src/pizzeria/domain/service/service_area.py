"""Domain service: delivery service area.

Delivery is limited to the Centro Universitario de los Altos campus in
Tepatitlán.  There is no geocoding: an address is deliverable when its
text mentions a known campus location or keyword.  Distances and
delivery times are likewise rough estimates inferred from the text.
"""

from __future__ import annotations

import logging
import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, time

logger = logging.getLogger(__name__)

AREA_NAME = "Centro Universitario de los Altos"
AREA_CITY = "Tepatitlán de Morelos"

CAMPUS_LOCATIONS: tuple[str, ...] = (
    "edificio a",
    "edificio b",
    "edificio c",
    "edificio d",
    "edificio e",
    "edificio f",
    "edificio g",
    "edificio h",
    "biblioteca",
    "cafetería central",
    "cafeteria central",
    "rectoría",
    "rectoria",
    "estacionamiento principal",
    "laboratorio de cómputo",
    "laboratorio de computo",
    "auditorio",
    "cancha de futbol",
    "cancha de basquet",
    "área verde",
    "area verde",
)

VALID_KEYWORDS: tuple[str, ...] = (
    "cualtos",
    "cu altos",
    "centro universitario",
    "universidad",
    "campus",
    "tepatitlán",
    "tepatitlan",
    "edificio",
    "aula",
    "laboratorio",
    "biblioteca",
    "cafetería",
    "cafeteria",
    "estacionamiento",
    "rectoría",
    "rectoria",
    "coordinación",
    "coordinacion",
)

_UNIVERSITY_KEYWORDS = ("universidad", "campus", "cualtos")

DELIVERY_OPENS = time(11, 0)
DELIVERY_CLOSES = time(23, 0)

_BASE_PREP_MINUTES = 15
_MINUTES_PER_KM = 3
_BUFFER_MINUTES = 5


class ServiceArea(ABC):

    @abstractmethod
    def is_deliverable(self, address: str) -> bool:
        """True if orders may be delivered to *address*."""


class CampusServiceArea(ServiceArea):
    """Keyword match against the campus locations and keywords above."""

    def __init__(
        self,
        locations: tuple[str, ...] = CAMPUS_LOCATIONS,
        keywords: tuple[str, ...] = VALID_KEYWORDS,
    ) -> None:
        self._locations = locations
        self._keywords = keywords

    def is_deliverable(self, address: str) -> bool:
        normalized = _normalize(address)
        if not normalized:
            return False
        if any(loc in normalized for loc in self._locations):
            return True
        if any(keyword in normalized for keyword in self._keywords):
            return True
        logger.debug("Address outside service area: %r", address)
        return False


@dataclass(frozen=True)
class Estimate:
    """A closed numeric range, e.g. 0.1–0.5 km or 16–17 minutes."""

    low: float
    high: float

    def __str__(self) -> str:
        if self.low == self.high:
            return f"{self.low:g}"
        return f"{self.low:g}-{self.high:g}"


def estimate_distance_km(address: str) -> Estimate:
    normalized = _normalize(address)
    if any(loc in normalized for loc in CAMPUS_LOCATIONS):
        return Estimate(0.1, 0.5)
    if any(keyword in normalized for keyword in _UNIVERSITY_KEYWORDS):
        return Estimate(0.5, 2.0)
    return Estimate(2.0, 5.0)


def estimate_delivery_minutes(address: str) -> Estimate:
    """Preparation plus travel at three minutes per kilometre."""
    distance = estimate_distance_km(address)
    fixed = _BASE_PREP_MINUTES + _BUFFER_MINUTES
    return Estimate(
        math.ceil(fixed + distance.low * _MINUTES_PER_KM),
        math.ceil(fixed + distance.high * _MINUTES_PER_KM),
    )


def is_delivery_hours(now: datetime) -> bool:
    return DELIVERY_OPENS <= now.time() < DELIVERY_CLOSES


_CAMPUS_TERMS = (
    (re.compile(r"\bcualtos\b", re.IGNORECASE), "CUAltos"),
    (re.compile(r"\bcu altos\b", re.IGNORECASE), "CU Altos"),
    (re.compile(r"\bcentro universitario\b", re.IGNORECASE), "Centro Universitario"),
    (re.compile(r"\bedificio ([a-h])\b", re.IGNORECASE),
     lambda m: f"Edificio {m.group(1).upper()}"),
    (re.compile(r"\btepatitl[aá]n\b", re.IGNORECASE), "Tepatitlán"),
)


def format_address(address: str) -> str:
    """Tidy an address for display, capitalising campus names."""
    formatted = address.strip()
    for pattern, replacement in _CAMPUS_TERMS:
        formatted = pattern.sub(replacement, formatted)
    return formatted


def _normalize(address: str | None) -> str:
    return (address or "").strip().lower()
