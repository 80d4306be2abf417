"""Application service: Show Stock use case (single product query).

Only two outcomes count as "no such stock": the source reporting the
product does not exist, and the source answering with an empty body.
Every other failure propagates to the caller.
"""

from __future__ import annotations

import logging

from stockquery.application.dto import StockViewDTO
from stockquery.domain.exceptions import ProductNotFoundError
from stockquery.domain.repository.product_source import ProductSource
from stockquery.domain.service.stock_view_mapper import StockViewMapper

logger = logging.getLogger(__name__)


class ShowStockHandler:

    def __init__(self, product_source: ProductSource, mapper: StockViewMapper) -> None:
        self._product_source = product_source
        self._mapper = mapper

    def handle(self, product_id: str) -> StockViewDTO | None:
        try:
            product = self._product_source.get_by_id(product_id)
        except ProductNotFoundError:
            logger.info("Product %s not found in catalog", product_id)
            return None

        if product is None:
            logger.info("Catalog returned an empty body for product %s", product_id)
            return None

        return StockViewDTO.from_view(self._mapper.to_stock_view(product))
