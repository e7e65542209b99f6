"""Domain events for the Product aggregate."""

from protean.fields import Date, DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue with its initial stock."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    kind: String(required=True)
    price: Float(required=True)
    quantity: Integer(required=True)
    expires_on: Date()
    weight_kg: Float()
    added_at: DateTime(required=True)


@storefront.event(part_of="Product")
class StockReduced:
    """Units of a product left the shelf at checkout."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    remaining: Integer(required=True)


@storefront.event(part_of="Product")
class ProductRestocked:
    """Units of a product were put back on the shelf."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    new_quantity: Integer(required=True)
