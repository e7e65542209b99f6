"""Console shipping adapter: prints the shipment notice."""

import sys
from collections.abc import Iterable
from typing import TextIO

import structlog

from storefront.shipping.port import ShipmentNotice, ShippableItem, ShippingService

logger = structlog.get_logger(__name__)


class ConsoleShippingService(ShippingService):
    """Writes every shipment notice to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def ship(self, items: Iterable[ShippableItem]) -> ShipmentNotice:
        notice = ShipmentNotice(items=tuple(items))
        print(notice, file=self.stream or sys.stdout)
        logger.info(
            "Shipment notice issued",
            units=len(notice.items),
            total_weight_kg=round(notice.total_weight, 3),
        )
        return notice
