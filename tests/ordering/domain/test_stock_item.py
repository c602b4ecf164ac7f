"""Tests for the StockItem snapshot: syncing and reserving units."""

import pytest
from ordering.stock.stock import StockItem
from protean.exceptions import ValidationError


def _stock(available=3):
    return StockItem.track("prod-1", "Aviator", 149.0, available)


class TestReserve:
    def test_reserving_reduces_available(self):
        item = _stock()
        item.reserve(2)
        assert item.available == 1

    def test_whole_shelf_can_be_reserved(self):
        item = _stock()
        item.reserve(3)
        assert item.available == 0

    def test_over_reservation_rejected(self):
        item = _stock(available=1)
        with pytest.raises(ValidationError) as exc:
            item.reserve(2)
        assert "(Available: 1, Requested: 2)" in exc.value.messages["items"][0]
        assert item.available == 1


class TestSync:
    def test_only_given_fields_change(self):
        item = _stock()
        item.sync(unit_price=129.0)
        assert (item.name, item.unit_price, item.available) == ("Aviator", 129.0, 3)

    def test_missing_stock_tracked_as_zero(self):
        assert StockItem.track("prod-2", "Case", 5.0, None).available == 0
