"""Domain service: Stock Traversal.

Walks every page of the catalog, one page at a time, and flattens the
mapped StockViews into a single ordered list.

The walk stops only when the catalog marks a page as ``last``. The page
count the catalog reports is never consulted because it can be stale or
missing. Fetches are strictly sequential: the next page index is only
known once the previous page has been seen.
"""

from __future__ import annotations

import logging

from stockquery.domain.exceptions import InvalidResponseError, TraversalLimitError
from stockquery.domain.model.stock_view import StockView
from stockquery.domain.model.value_objects import PageRequest
from stockquery.domain.repository.product_source import ProductSource
from stockquery.domain.service.stock_view_mapper import StockViewMapper

logger = logging.getLogger(__name__)


class StockTraversalService:

    def __init__(
        self,
        product_source: ProductSource,
        mapper: StockViewMapper,
        max_pages: int | None = None,
    ) -> None:
        self._product_source = product_source
        self._mapper = mapper
        self._max_pages = max_pages

    def fetch_all(
        self, start_page: int | None = None, page_size: int | None = None
    ) -> list[StockView]:
        """Fetch every page from ``start_page`` onward.

        Any failure aborts the walk and propagates; stock views collected
        from earlier pages are discarded rather than returned partially.
        When ``max_pages`` is set, exceeding it raises TraversalLimitError.
        """
        request = PageRequest.of(start_page, page_size)
        collected: list[StockView] = []
        fetched = 0

        while True:
            if self._max_pages is not None and fetched >= self._max_pages:
                raise TraversalLimitError(
                    f"Catalog still reports more pages after {fetched} fetches"
                )

            page = self._product_source.get_page(request.page, request.size)
            fetched += 1

            if page is None:
                raise InvalidResponseError(
                    f"Empty response for page {request.page} (size {request.size})",
                    status_code=200,
                )
            if page.last is None:
                raise InvalidResponseError(
                    f"Page {request.page} does not say whether it is the last one",
                    status_code=200,
                )

            if not page.content:
                logger.debug("Page %d returned no products", request.page)
            else:
                now = self._mapper.now()
                collected.extend(
                    self._mapper.to_stock_view(product, now) for product in page.content
                )
                logger.debug(
                    "Page %d returned %d products (%d so far)",
                    request.page, len(page.content), len(collected),
                )

            if page.last:
                break
            request = request.next()

        logger.info(
            "Traversal finished: %d stock views from %d pages", len(collected), fetched
        )
        return collected
