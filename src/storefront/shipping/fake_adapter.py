"""Fake shipping adapter: records notices for testing and development."""

from collections.abc import Iterable

from storefront.shipping.port import ShipmentNotice, ShippableItem, ShippingService


class FakeShippingService(ShippingService):
    """Keeps every notice in memory instead of printing it."""

    def __init__(self):
        self.shipments: list[ShipmentNotice] = []

    def ship(self, items: Iterable[ShippableItem]) -> ShipmentNotice:
        notice = ShipmentNotice(items=tuple(items))
        self.shipments.append(notice)
        return notice

    @property
    def last_shipment(self) -> ShipmentNotice | None:
        return self.shipments[-1] if self.shipments else None
