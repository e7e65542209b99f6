"""Product aggregate: plain, expirable, shippable, or both.

A product is expirable when it carries an expiry date and shippable when it
carries a weight. The two capabilities are independent, so the kind is
derived rather than stored.
"""

from datetime import date, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Date, DateTime, Float, Integer, String, ValueObject

from storefront.domain import storefront

# Conversion factors to kilograms
_KILOGRAMS_PER_UNIT = {
    "kg": 1.0,
    "g": 0.001,
    "lb": 0.45359237,
    "oz": 0.028349523125,
}


class ProductKind(Enum):
    """Enumeration of product capabilities."""

    PLAIN = "Plain"
    EXPIRABLE = "Expirable"
    SHIPPABLE = "Shippable"
    EXPIRABLE_SHIPPABLE = "ExpirableShippable"


@storefront.value_object(part_of="Product")
class Weight:
    """Value object for the physical weight of one unit."""

    value: Float(required=True, min_value=0.0)
    unit: String(max_length=2, default="kg")

    @invariant.post
    def unit_must_be_valid(self):
        if self.unit not in _KILOGRAMS_PER_UNIT:
            raise ValidationError({"unit": [f"Weight unit must be 'kg', 'g', 'lb', or 'oz', got '{self.unit}'"]})

    def in_kilograms(self) -> float:
        return self.value * _KILOGRAMS_PER_UNIT[self.unit]


@storefront.aggregate
class Product:
    """A sellable item with price and shelf stock."""

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    quantity: Integer(required=True, min_value=0)
    expires_on: Date()
    weight: ValueObject(Weight)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, price, quantity, expires_on=None, weight=None):
        """Add a product to the catalogue.

        Args:
            name: Display name, used on receipts and shipment notices.
            price: Unit price.
            quantity: Initial stock.
            expires_on: Last day the product may be sold. Makes it expirable.
            weight: Unit weight, either a ``Weight`` or a number of kilograms.
                Makes it shippable.
        """
        from storefront.catalogue.events import ProductAdded

        weight_vo = Weight(value=weight, unit="kg") if isinstance(weight, (int, float)) else weight
        now = datetime.now()

        product = cls(
            name=name,
            price=price,
            quantity=quantity,
            expires_on=expires_on,
            weight=weight_vo,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                kind=product.kind.value,
                price=product.price,
                quantity=product.quantity,
                expires_on=product.expires_on,
                weight_kg=product.weight_kg,
                added_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------
    @property
    def is_expirable(self) -> bool:
        return self.expires_on is not None

    @property
    def is_shippable(self) -> bool:
        return self.weight is not None

    @property
    def kind(self) -> ProductKind:
        if self.is_expirable and self.is_shippable:
            return ProductKind.EXPIRABLE_SHIPPABLE
        if self.is_expirable:
            return ProductKind.EXPIRABLE
        if self.is_shippable:
            return ProductKind.SHIPPABLE
        return ProductKind.PLAIN

    @property
    def weight_kg(self) -> float | None:
        return self.weight.in_kilograms() if self.weight is not None else None

    def is_expired(self, today: date | None = None) -> bool:
        """A product expires the day after its expiry date."""
        if not self.is_expirable:
            return False
        today = today or date.today()
        return today > self.expires_on

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def reduce_stock(self, quantity):
        from storefront.catalogue.events import StockReduced

        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.quantity:
            raise ValidationError({"quantity": [f"{self.name} out of stock"]})

        self.quantity -= quantity

        self.raise_(
            StockReduced(
                product_id=self.id,
                quantity=quantity,
                remaining=self.quantity,
            )
        )

    def restock(self, quantity):
        from storefront.catalogue.events import ProductRestocked

        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        self.quantity += quantity

        self.raise_(
            ProductRestocked(
                product_id=self.id,
                quantity=quantity,
                new_quantity=self.quantity,
            )
        )
