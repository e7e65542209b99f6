"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A customer was registered with an opening balance."""

    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True)
    balance: Float(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="Customer")
class CustomerCharged:
    """An amount was deducted from the customer's balance."""

    __version__ = 1

    customer_id: Identifier(required=True)
    amount: Float(required=True)
    remaining_balance: Float(required=True)


@storefront.event(part_of="Customer")
class BalanceToppedUp:
    __version__ = 1

    customer_id: Identifier(required=True)
    amount: Float(required=True)
    new_balance: Float(required=True)
