"""Cart aggregate: products a customer intends to buy, with quantities.

Each product appears at most once; adding it again raises the quantity.
Items keep the order in which they were first added, which is also the order
of the receipt lines.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCheckedOut, CartItemAdded, CartItemRemoved
from storefront.domain import storefront


class CartStatus(Enum):
    ACTIVE = "Active"
    CHECKED_OUT = "CheckedOut"


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class Cart:
    customer_id = Identifier()  # Set at checkout if not known earlier
    items = HasMany(CartItem)
    status = String(choices=CartStatus, default=CartStatus.ACTIVE.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def cart_must_have_items_to_check_out(self):
        if self.status == CartStatus.CHECKED_OUT.value and not self.items:
            raise ValidationError({"cart": ["Cannot check out an empty cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id=None):
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            status=CartStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return not self.items

    def item_for(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def quantity_of(self, product_id) -> int:
        item = self.item_for(product_id)
        return item.quantity if item else 0

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product, quantity):
        """Add ``quantity`` units of ``product``, bounded by its current stock."""
        if CartStatus(self.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": ["Items can only be added to an active cart"]})
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        existing = self.item_for(product.id)
        if self.quantity_of(product.id) + quantity > product.quantity:
            raise ValidationError({"quantity": ["Not enough stock"]})

        now = datetime.now(UTC)

        if existing:
            existing.quantity += quantity
            item_id = str(existing.id)
        else:
            item = CartItem(product_id=product.id, quantity=quantity, added_at=now)
            self.add_items(item)
            item_id = str(item.id)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=item_id,
                product_id=str(product.id),
                quantity=quantity,
            )
        )

    def remove_item(self, item_id):
        """Remove an item from the cart."""
        if CartStatus(self.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": ["Items can only be removed from an active cart"]})

        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), item_id=str(item_id)))

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def check_out(self, customer_id, amount):
        """Mark the cart as settled by ``customer_id`` for ``amount``."""
        if CartStatus(self.status) != CartStatus.ACTIVE:
            raise ValidationError({"status": ["Only active carts can be checked out"]})
        if self.is_empty:
            raise ValidationError({"cart": ["Cart is empty"]})

        now = datetime.now(UTC)
        self.customer_id = customer_id
        self.status = CartStatus.CHECKED_OUT.value
        self.updated_at = now

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                customer_id=str(customer_id),
                item_count=len(self.items),
                amount=amount,
                checked_out_at=now,
            )
        )
