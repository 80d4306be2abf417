"""Application service: List All Stock use case (query over every page)."""

from __future__ import annotations

from stockquery.application.dto import StockViewDTO
from stockquery.domain.service.stock_traversal_service import StockTraversalService


class ListAllStockHandler:

    def __init__(self, traversal: StockTraversalService) -> None:
        self._traversal = traversal

    def handle(
        self, page_size: int | None = None, start_page: int | None = None
    ) -> list[StockViewDTO]:
        views = self._traversal.fetch_all(start_page=start_page, page_size=page_size)
        return [StockViewDTO.from_view(view) for view in views]
