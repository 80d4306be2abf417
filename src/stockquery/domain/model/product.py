"""UpstreamProduct: the product record as delivered by the catalog.

Received once per upstream call and discarded after it has been mapped
into a StockView. ``quantity_in_stock`` may be missing when the catalog
omits or renames its stock field.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class UpstreamProduct:

    id: str
    name: str
    description: str | None = None
    price: Decimal | None = None
    quantity_in_stock: int | None = None
