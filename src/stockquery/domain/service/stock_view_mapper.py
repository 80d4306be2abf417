"""Domain service: Stock View Mapper.

Turns catalog records into StockViews and decides the below-minimum
flag against the threshold the mapper was built with.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from stockquery.domain.model.page import Page
from stockquery.domain.model.product import UpstreamProduct
from stockquery.domain.model.stock_view import StockView, is_below_minimum
from stockquery.domain.model.value_objects import StockThreshold

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StockViewMapper:

    def __init__(
        self,
        threshold: StockThreshold | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._threshold = threshold or StockThreshold()
        self._clock = clock

    @property
    def threshold(self) -> StockThreshold:
        return self._threshold

    def now(self) -> datetime:
        return self._clock()

    def to_stock_view(
        self, product: UpstreamProduct, now: datetime | None = None
    ) -> StockView:
        """Map one catalog record.

        A product without a stock quantity still maps; its quantity and
        below-minimum flag are both left as ``None``.
        """
        if product.quantity_in_stock is None:
            logger.warning(
                "Product %s has no stock quantity; below-minimum is unknown",
                product.id,
            )
        return StockView(
            product_id=product.id,
            product_name=product.name,
            quantity_available=product.quantity_in_stock,
            last_updated=now if now is not None else self.now(),
            below_minimum=is_below_minimum(
                product.quantity_in_stock, self._threshold.value
            ),
        )

    def to_stock_page(
        self, page: Page[UpstreamProduct], now: datetime | None = None
    ) -> Page[StockView]:
        """Map every record of a page, keeping its meta-data untouched."""
        stamp = now if now is not None else self.now()
        return page.map(lambda product: self.to_stock_view(product, stamp))
