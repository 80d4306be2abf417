"""Application service: List Stock Page use case (query).

Exactly one catalog call. The page meta-data is passed through as the
catalog reported it; only the content is replaced by stock views.
"""

from __future__ import annotations

import logging

from stockquery.application.dto import StockPageDTO
from stockquery.domain.exceptions import InvalidResponseError
from stockquery.domain.model.value_objects import PageRequest
from stockquery.domain.repository.product_source import ProductSource
from stockquery.domain.service.stock_view_mapper import StockViewMapper

logger = logging.getLogger(__name__)


class ListStockPageHandler:

    def __init__(self, product_source: ProductSource, mapper: StockViewMapper) -> None:
        self._product_source = product_source
        self._mapper = mapper

    def handle(self, page: int | None = None, size: int | None = None) -> StockPageDTO:
        request = PageRequest.of(page, size)
        if size is not None and size != request.size:
            logger.warning("Page size %d out of range, using %d", size, request.size)

        upstream_page = self._product_source.get_page(request.page, request.size)
        if upstream_page is None:
            raise InvalidResponseError(
                f"Empty response for page {request.page} (size {request.size})",
                status_code=200,
            )

        return StockPageDTO.from_page(self._mapper.to_stock_page(upstream_page))
