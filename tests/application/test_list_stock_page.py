"""Integration tests for the ListStockPage use case."""

import pytest

from stockquery.application.list_stock_page import ListStockPageHandler
from stockquery.domain.exceptions import InvalidResponseError, UpstreamError
from tests.fakes import FakeProductSource, fixed_mapper, make_page, product


def _handler(source):
    return ListStockPageHandler(source, fixed_mapper())


class TestListStockPage:

    def test_defaults_to_first_page_of_twenty(self):
        source = FakeProductSource(pages={0: make_page([product("a")])})

        _handler(source).handle()

        assert source.page_calls == [(0, 20)]

    def test_metadata_passed_through_unchanged(self):
        upstream = make_page([product("a", 3), product("b", 30)], page=2, size=2,
                             last=False, total_elements=11, total_pages=6)
        source = FakeProductSource(pages={2: upstream})

        dto = _handler(source).handle(page=2, size=2)

        assert (dto.page, dto.size, dto.total_elements) == (2, 2, 11)
        assert (dto.total_pages, dto.first, dto.last) == (6, False, False)
        assert [item.product_id for item in dto.content] == ["a", "b"]
        assert [item.stock_below_minimum for item in dto.content] == [True, False]

    def test_exactly_one_call_even_when_not_last(self):
        source = FakeProductSource(pages={0: make_page([product("a")], last=False)})

        _handler(source).handle(0, 10)

        assert source.page_calls == [(0, 10)]

    def test_size_clamped_to_hundred(self):
        source = FakeProductSource(pages={0: make_page([])})

        _handler(source).handle(0, 1000)

        assert source.page_calls == [(0, 100)]

    def test_negative_page_becomes_zero(self):
        source = FakeProductSource(pages={0: make_page([])})

        _handler(source).handle(-2, 10)

        assert source.page_calls == [(0, 10)]

    def test_empty_page(self):
        source = FakeProductSource(pages={0: make_page([], total_elements=0, total_pages=0)})

        dto = _handler(source).handle()

        assert dto.content == []
        assert dto.total_elements == 0

    def test_missing_body_is_failure_not_empty(self):
        source = FakeProductSource(pages={0: None})

        with pytest.raises(InvalidResponseError, match="Empty response"):
            _handler(source).handle()

    def test_upstream_error_propagates(self):
        source = FakeProductSource(pages={0: UpstreamError("oops", status_code=502)})

        with pytest.raises(UpstreamError):
            _handler(source).handle()

    def test_to_dict_uses_wire_names(self):
        source = FakeProductSource(pages={0: make_page([product("a", 1)], total_pages=1)})

        payload = _handler(source).handle().to_dict()

        assert set(payload) == {"content", "page", "size", "totalElements", "totalPages", "first", "last"}
        assert set(payload["content"][0]) == {
            "productId", "productName", "quantityAvailable", "lastUpdated", "stockBelowMinimum",
        }
