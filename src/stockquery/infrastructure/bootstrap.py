"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from stockquery.application.list_all_stock import ListAllStockHandler
from stockquery.application.list_stock_page import ListStockPageHandler
from stockquery.application.show_stock import ShowStockHandler
from stockquery.domain.model.value_objects import StockThreshold
from stockquery.domain.repository.product_source import ProductSource
from stockquery.domain.service.stock_traversal_service import StockTraversalService
from stockquery.domain.service.stock_view_mapper import StockViewMapper
from stockquery.infrastructure.client.http_product_source import HttpProductSource
from stockquery.infrastructure.config import Settings
from stockquery.infrastructure.persistence.json_product_source import JsonProductSource

logger = logging.getLogger(__name__)


def product_source(settings: Settings) -> ProductSource:
    if settings.source == "json":
        logger.debug("Using JSON product source at %s", settings.data_file)
        return JsonProductSource(settings.data_file)
    logger.debug("Using product service at %s", settings.product_service_url)
    return HttpProductSource(
        settings.product_service_url, timeout=settings.product_service_timeout
    )


def stock_view_mapper(settings: Settings) -> StockViewMapper:
    return StockViewMapper(StockThreshold(settings.minimum_stock))


def show_stock_handler(settings: Settings) -> ShowStockHandler:
    return ShowStockHandler(product_source(settings), stock_view_mapper(settings))


def list_stock_page_handler(settings: Settings) -> ListStockPageHandler:
    return ListStockPageHandler(product_source(settings), stock_view_mapper(settings))


def list_all_stock_handler(settings: Settings) -> ListAllStockHandler:
    traversal = StockTraversalService(
        product_source(settings),
        stock_view_mapper(settings),
        max_pages=settings.max_pages,
    )
    return ListAllStockHandler(traversal)
