"""StockView: the read-model projection of a product's availability."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def is_below_minimum(quantity: int | None, threshold: int) -> bool | None:
    """Return True when ``quantity`` is strictly under ``threshold``.

    An absent quantity cannot be classified, so the answer is ``None``
    ("unknown") rather than a guess in either direction.
    """
    if quantity is None:
        return None
    return quantity < threshold


@dataclass(frozen=True)
class StockView:
    """Availability of a single product at the moment it was mapped.

    Immutable: a fresh StockView is built from every upstream response
    and never persisted. ``last_updated`` is the mapping time, not a
    value supplied by the catalog.
    """

    product_id: str
    product_name: str
    quantity_available: int | None
    last_updated: datetime
    below_minimum: bool | None
