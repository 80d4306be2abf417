"""Integration tests for the ShowStock use case."""

import pytest

from stockquery.application.show_stock import ShowStockHandler
from stockquery.domain.exceptions import (
    InvalidResponseError,
    UpstreamError,
    UpstreamUnavailableError,
)
from tests.fakes import FIXED_NOW, FakeProductSource, fixed_mapper, product


def _handler(source):
    return ShowStockHandler(source, fixed_mapper())


class TestShowStockFound:

    def test_returns_stock_view(self):
        source = FakeProductSource(products=[product("42", quantity=5, name="Widget")])

        dto = _handler(source).handle("42")

        assert dto.product_id == "42"
        assert dto.product_name == "Widget"
        assert dto.quantity_available == 5
        assert dto.stock_below_minimum is True
        assert dto.last_updated == FIXED_NOW.isoformat()

    def test_single_upstream_call(self):
        source = FakeProductSource(products=[product("42")])

        _handler(source).handle("42")

        assert source.by_id_calls == ["42"]

    def test_unknown_quantity(self):
        source = FakeProductSource(products=[product("42", quantity=None)])

        dto = _handler(source).handle("42")

        assert dto.quantity_available is None
        assert dto.stock_below_minimum is None


class TestShowStockAbsent:

    def test_not_found_is_absent(self):
        source = FakeProductSource(products=[])

        assert _handler(source).handle("missing") is None

    def test_empty_body_is_absent(self):
        source = FakeProductSource(empty_body_ids={"42"})

        assert _handler(source).handle("42") is None


class TestShowStockFailures:

    def test_server_error_propagates(self):
        source = FakeProductSource(by_id_error=UpstreamError("down", status_code=500))

        with pytest.raises(UpstreamError) as excinfo:
            _handler(source).handle("42")

        assert excinfo.value.status_code == 500

    def test_client_error_other_than_404_propagates(self):
        source = FakeProductSource(by_id_error=UpstreamError("bad id", status_code=400))

        with pytest.raises(UpstreamError):
            _handler(source).handle("not-a-uuid")

    def test_unreachable_propagates(self):
        source = FakeProductSource(by_id_error=UpstreamUnavailableError("refused"))

        with pytest.raises(UpstreamUnavailableError) as excinfo:
            _handler(source).handle("42")

        assert excinfo.value.status_code == -1

    def test_unparseable_body_propagates(self):
        source = FakeProductSource(by_id_error=InvalidResponseError("garbage", status_code=200))

        with pytest.raises(InvalidResponseError):
            _handler(source).handle("42")
