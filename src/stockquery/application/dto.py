"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry stock data from the application layer to the CLI without
exposing domain internals. ``to_dict()`` renders the camelCase shape
the stock endpoints have always returned.
"""

from __future__ import annotations

from dataclasses import dataclass

from stockquery.domain.model.page import Page
from stockquery.domain.model.stock_view import StockView


@dataclass(frozen=True)
class StockViewDTO:
    """Output: availability of one product as displayed to the user."""

    product_id: str
    product_name: str
    quantity_available: int | None
    last_updated: str  # ISO-8601
    stock_below_minimum: bool | None  # None when the quantity is unknown

    @classmethod
    def from_view(cls, view: StockView) -> StockViewDTO:
        return cls(
            product_id=view.product_id,
            product_name=view.product_name,
            quantity_available=view.quantity_available,
            last_updated=view.last_updated.isoformat(),
            stock_below_minimum=view.below_minimum,
        )

    def to_dict(self) -> dict:
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "quantityAvailable": self.quantity_available,
            "lastUpdated": self.last_updated,
            "stockBelowMinimum": self.stock_below_minimum,
        }


@dataclass(frozen=True)
class StockPageDTO:
    """Output: one page of stock views plus the catalog's paging meta-data."""

    content: list[StockViewDTO]
    page: int | None
    size: int | None
    total_elements: int | None
    total_pages: int | None
    first: bool | None
    last: bool | None

    @classmethod
    def from_page(cls, page: Page[StockView]) -> StockPageDTO:
        return cls(
            content=[StockViewDTO.from_view(view) for view in page.content],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.first,
            last=page.last,
        )

    def to_dict(self) -> dict:
        return {
            "content": [item.to_dict() for item in self.content],
            "page": self.page,
            "size": self.size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
            "first": self.first,
            "last": self.last,
        }
