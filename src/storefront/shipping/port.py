"""Shipping service port (abstract interface).

Defines the contract every shipping adapter implements, together with the
value types that cross it. Checkout only talks to ``ShippingService``.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ShippableItem:
    """One physical unit to ship. Weight is in kilograms."""

    name: str
    weight: float


@dataclass(frozen=True)
class ShipmentNotice:
    """The parcel handed to the carrier: one entry per unit."""

    items: tuple[ShippableItem, ...]

    @property
    def total_weight(self) -> float:
        return sum(item.weight for item in self.items)

    def lines(self) -> list[str]:
        lines = ["** Shipment notice **"]
        lines.extend(f"{item.name} {item.weight * 1000:.0f}g" for item in self.items)
        lines.append(f"Total package weight {self.total_weight:.1f}kg")
        return lines

    def __str__(self) -> str:
        return "\n".join(self.lines())


class ShippingService(ABC):
    """Abstract shipping interface."""

    @abstractmethod
    def ship(self, items: Iterable[ShippableItem]) -> ShipmentNotice:
        """Dispatch the given units and return the resulting notice."""
        ...
