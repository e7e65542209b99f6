"""Tests for shipment notices and the shipping adapters."""

import io

import pytest

from storefront.shipping import get_shipper, reset_shipper, set_shipper
from storefront.shipping.console_adapter import ConsoleShippingService
from storefront.shipping.fake_adapter import FakeShippingService
from storefront.shipping.port import ShipmentNotice, ShippableItem


class TestShipmentNotice:
    def test_total_weight(self):
        notice = ShipmentNotice(items=(ShippableItem("Laptop", 2.5), ShippableItem("Cheese", 0.5)))
        assert notice.total_weight == pytest.approx(3.0)

    def test_lines(self):
        notice = ShipmentNotice(items=(ShippableItem("Laptop", 2.5), ShippableItem("Cheese", 0.4)))
        assert notice.lines() == [
            "** Shipment notice **",
            "Laptop 2500g",
            "Cheese 400g",
            "Total package weight 2.9kg",
        ]

    def test_one_line_per_unit(self):
        notice = ShipmentNotice(items=(ShippableItem("Cheese", 0.2),) * 2)
        assert notice.lines()[1:3] == ["Cheese 200g", "Cheese 200g"]
        assert notice.lines()[-1] == "Total package weight 0.4kg"


class TestConsoleShippingService:
    def test_prints_notice(self):
        stream = io.StringIO()
        notice = ConsoleShippingService(stream=stream).ship([ShippableItem("TV", 8.0)])
        assert stream.getvalue() == "** Shipment notice **\nTV 8000g\nTotal package weight 8.0kg\n"
        assert notice.items == (ShippableItem("TV", 8.0),)


class TestFakeShippingService:
    def test_records_notices(self):
        fake = FakeShippingService()
        assert fake.last_shipment is None
        fake.ship([ShippableItem("TV", 8.0)])
        fake.ship(iter([ShippableItem("Radio", 1.0)]))
        assert len(fake.shipments) == 2
        assert fake.last_shipment.items == (ShippableItem("Radio", 1.0),)


class TestShipperFactory:
    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPPING_ADAPTER", "console")
        reset_shipper()
        assert isinstance(get_shipper(), ConsoleShippingService)

    def test_fake_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPPING_ADAPTER", "fake")
        reset_shipper()
        assert isinstance(get_shipper(), FakeShippingService)

    def test_shipper_is_cached(self):
        assert get_shipper() is get_shipper()

    def test_set_shipper(self):
        fake = FakeShippingService()
        set_shipper(fake)
        assert get_shipper() is fake
