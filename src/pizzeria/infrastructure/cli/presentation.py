"""Display lookups for order statuses and elapsed times.

Labels are the Spanish ones shown to customers and kitchen staff.
"""

from __future__ import annotations

from datetime import timedelta

from pizzeria.domain.model.order import OrderStatus

STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Pendiente",
    OrderStatus.CONFIRMED: "Confirmado",
    OrderStatus.PREPARING: "Preparando",
    OrderStatus.BAKING: "Horneando",
    OrderStatus.READY: "Listo",
    OrderStatus.DELIVERED: "Entregado",
}

STATUS_PROGRESS: dict[OrderStatus, int] = {
    OrderStatus.PENDING: 0,
    OrderStatus.CONFIRMED: 25,
    OrderStatus.PREPARING: 50,
    OrderStatus.BAKING: 75,
    OrderStatus.READY: 90,
    OrderStatus.DELIVERED: 100,
}

STATUS_ETA: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "5 min",
    OrderStatus.CONFIRMED: "20-25 min",
    OrderStatus.PREPARING: "15-20 min",
    OrderStatus.BAKING: "10-15 min",
    OrderStatus.READY: "5-10 min",
    OrderStatus.DELIVERED: "Completado",
}

PRIORITY_MARKERS = {"normal": "", "high": "(!)", "urgent": "(!!)"}


def status_label(status: str) -> str:
    try:
        return STATUS_LABELS[OrderStatus(status)]
    except ValueError:
        return status


def status_progress(status: str) -> int:
    try:
        return STATUS_PROGRESS[OrderStatus(status)]
    except ValueError:
        return 0


def status_eta(status: str) -> str:
    try:
        return STATUS_ETA[OrderStatus(status)]
    except ValueError:
        return "25-30 min"


def progress_bar(status: str, width: int = 20) -> str:
    filled = round(width * status_progress(status) / 100)
    return "[" + "#" * filled + "." * (width - filled) + f"] {status_progress(status)}%"


def format_elapsed(elapsed: timedelta) -> str:
    """``"42 min"`` under an hour, ``"1h 5m"`` after."""
    minutes = max(int(elapsed.total_seconds() // 60), 0)
    if minutes < 60:
        return f"{minutes} min"
    return f"{minutes // 60}h {minutes % 60}m"
