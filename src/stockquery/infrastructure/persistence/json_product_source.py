"""JSON-file-backed implementation of ProductSource.

Serves the same read contract as the catalog client from a local file
holding product records in the catalog's wire shape. Useful for demos,
offline runs and as the storage-backed alternative to the HTTP source.
"""

from __future__ import annotations

import json
import math
from pathlib import Path

import pydantic

from stockquery.domain.exceptions import (
    InvalidResponseError,
    ProductNotFoundError,
    UpstreamUnavailableError,
)
from stockquery.domain.model.page import Page
from stockquery.domain.model.product import UpstreamProduct
from stockquery.domain.repository.product_source import ProductSource
from stockquery.infrastructure.client.schemas import ProductPayload


class JsonProductSource(ProductSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductSource interface ----------------------------------------------

    def get_by_id(self, product_id: str) -> UpstreamProduct | None:
        for product in self._load():
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    def get_page(self, page: int, size: int) -> Page[UpstreamProduct] | None:
        products = self._load()
        total = len(products)
        total_pages = math.ceil(total / size) if total else 0
        start = page * size
        return Page(
            content=tuple(products[start:start + size]),
            page=page,
            size=size,
            total_elements=total,
            total_pages=total_pages,
            first=page == 0,
            last=page >= total_pages - 1,
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[UpstreamProduct]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise UpstreamUnavailableError(
                f"Stock data file not found: {self._file_path}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise InvalidResponseError(
                f"Stock data file is not valid JSON: {self._file_path}"
            ) from exc

        if not isinstance(raw, list):
            raise InvalidResponseError(
                f"Stock data file must hold a list of products: {self._file_path}"
            )
        try:
            return [ProductPayload.model_validate(item).to_domain() for item in raw]
        except pydantic.ValidationError as exc:
            raise InvalidResponseError(
                f"Invalid product record in {self._file_path}"
            ) from exc
