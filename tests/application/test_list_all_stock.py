"""Integration tests for the ListAllStock use case."""

import pytest

from stockquery.application.list_all_stock import ListAllStockHandler
from stockquery.domain.exceptions import UpstreamUnavailableError
from stockquery.domain.service.stock_traversal_service import StockTraversalService
from tests.fakes import FakeProductSource, fixed_mapper, make_page, product


def _handler(source):
    return ListAllStockHandler(StockTraversalService(source, fixed_mapper()))


class TestListAllStock:

    def test_returns_every_page_as_dtos(self):
        source = FakeProductSource(pages={
            0: make_page([product("a", 2), product("b", 12)], last=False),
            1: make_page([product("c", None)], page=1, last=True),
        })

        items = _handler(source).handle(page_size=2)

        assert [i.product_id for i in items] == ["a", "b", "c"]
        assert [i.stock_below_minimum for i in items] == [True, False, None]

    def test_start_page_forwarded(self):
        source = FakeProductSource(pages={1: make_page([product("z")], page=1, last=True)})

        _handler(source).handle(page_size=5, start_page=1)

        assert source.page_calls == [(1, 5)]

    def test_failure_returns_no_partial_results(self):
        source = FakeProductSource(pages={
            0: make_page([product("a")], last=False),
            1: UpstreamUnavailableError("refused"),
        })

        with pytest.raises(UpstreamUnavailableError):
            _handler(source).handle()
