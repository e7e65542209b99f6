"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    """An item was removed from the cart."""

    __version__ = 1

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart was settled against a customer's balance."""

    __version__ = 1

    cart_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    item_count: Integer(required=True)
    amount: Float(required=True)
    checked_out_at: DateTime(required=True)
