"""Unit tests for domain value objects."""

import pytest

from stockquery.domain.exceptions import ValidationError
from stockquery.domain.model.value_objects import (
    MAX_PAGE_SIZE,
    PageRequest,
    StockThreshold,
    clamp_page_size,
)


# ── StockThreshold ───────────────────────────────────────────────────────────


class TestStockThreshold:

    def test_default_is_ten(self):
        assert StockThreshold().value == 10

    def test_zero_allowed(self):
        assert StockThreshold(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockThreshold(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockThreshold(2.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockThreshold(True)

    def test_equality_by_value(self):
        assert StockThreshold(5) == StockThreshold(5)


# ── PageRequest ──────────────────────────────────────────────────────────────


class TestPageRequestOf:

    def test_defaults(self):
        request = PageRequest.of()
        assert request == PageRequest(0, 20)

    def test_custom_default_size(self):
        assert PageRequest.of(default_size=50).size == 50

    def test_size_above_max_clamped(self):
        assert PageRequest.of(0, 500).size == MAX_PAGE_SIZE

    def test_size_exactly_max_kept(self):
        assert PageRequest.of(0, 100).size == 100

    def test_size_below_one_clamped(self):
        assert PageRequest.of(0, 0).size == 1
        assert PageRequest.of(0, -7).size == 1

    def test_negative_page_becomes_zero(self):
        assert PageRequest.of(-3, 10).page == 0

    def test_page_kept(self):
        assert PageRequest.of(4, 10).page == 4


class TestPageRequest:

    def test_next_advances_page_only(self):
        assert PageRequest(2, 30).next() == PageRequest(3, 30)

    def test_negative_page_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            PageRequest(-1, 10)

    def test_oversized_rejected(self):
        with pytest.raises(ValidationError, match="between 1 and 100"):
            PageRequest(0, 101)

    @pytest.mark.parametrize("size, expected", [(1, 1), (50, 50), (100, 100), (101, 100), (10_000, 100)])
    def test_clamp_page_size(self, size, expected):
        assert clamp_page_size(size) == expected
