"""
Wire schemas for the product catalog responses.
All payloads are validated with Pydantic before they reach the domain.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockquery.domain.model.page import Page
from stockquery.domain.model.product import UpstreamProduct


class ProductPayload(BaseModel):
    """
    Catalog product schema.
    The catalog calls its stock field ``stockQuantity``; it is exposed here
    under the internal name ``quantity_in_stock``. Missing means unknown.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    description: str | None = None
    price: Decimal | None = None
    quantity_in_stock: int | None = Field(default=None, alias="stockQuantity")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        # The catalog uses UUIDs; other stores may use plain integers
        return str(v) if v is not None else v

    def to_domain(self) -> UpstreamProduct:
        return UpstreamProduct(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price,
            quantity_in_stock=self.quantity_in_stock,
        )


class ProductPagePayload(BaseModel):
    """
    Paged catalog response: content plus zero-based paging meta-data.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    content: list[ProductPayload] | None = None
    page: int | None = None
    size: int | None = None
    total_elements: int | None = Field(default=None, alias="totalElements")
    total_pages: int | None = Field(default=None, alias="totalPages")
    first: bool | None = None
    last: bool | None = None

    def to_domain(self) -> Page[UpstreamProduct]:
        return Page(
            content=tuple(item.to_domain() for item in self.content or ()),
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
            total_pages=self.total_pages,
            first=self.first,
            last=self.last,
        )
