"""Checkout receipt: the settled totals of a cart, and how they print."""

from dataclasses import dataclass

from storefront.shipping.port import ShipmentNotice

RULE = "-" * 22


@dataclass(frozen=True)
class ReceiptLine:
    product_name: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Receipt:
    """Result of a successful checkout."""

    lines: tuple[ReceiptLine, ...]
    subtotal: float
    shipping_fee: float
    amount: float
    remaining_balance: float
    shipment: ShipmentNotice | None = None

    def render(self) -> list[str]:
        out = ["** Checkout receipt **"]
        out.extend(f"{line.quantity}x {line.product_name} {line.line_total:.0f}" for line in self.lines)
        out.append(RULE)
        out.append(f"Subtotal {self.subtotal:.0f}")
        out.append(f"Shipping {self.shipping_fee:.0f}")
        out.append(f"Amount {self.amount:.0f}")
        out.append(f"Customer remaining balance: {self.remaining_balance:.0f}")
        out.append("END.")
        return out

    def __str__(self) -> str:
        return "\n".join(self.render())
