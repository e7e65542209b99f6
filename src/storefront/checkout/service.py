"""Checkout service: settles a cart against a customer's balance.

The service works on aggregates the caller has already loaded, which keeps it
free of repositories: the ``CheckoutCart`` handler does the loading and
persisting, tests can drive the service directly.

Every rule is checked before anything is mutated, so a failed checkout leaves
stock, balance and cart as they were.
"""

from datetime import date

import structlog
from protean.exceptions import ValidationError

from storefront.checkout.receipt import Receipt, ReceiptLine
from storefront.config import DEFAULT_SHIPPING_FEE
from storefront.shipping import get_shipper
from storefront.shipping.port import ShippableItem, ShippingService

logger = structlog.get_logger(__name__)


class CheckoutService:
    def __init__(
        self,
        shipping_fee: float = DEFAULT_SHIPPING_FEE,
        shipper: ShippingService | None = None,
        today: date | None = None,
    ) -> None:
        self.shipping_fee = shipping_fee
        self.shipper = shipper
        self.today = today

    def checkout(self, customer, cart, products) -> Receipt:
        """Validate, charge and ship.

        Args:
            customer: The paying ``Customer``.
            cart: The ``Cart`` to settle.
            products: Mapping of product id (as ``str``) to ``Product`` for
                every item in the cart.

        Returns:
            The ``Receipt``, including the shipment notice when any unit ships.

        Raises:
            ValidationError: Empty cart, unknown or expired product, stock
                shortfall, or insufficient balance.
        """
        if cart.is_empty:
            raise ValidationError({"cart": ["Cart is empty"]})

        today = self.today or date.today()
        lines: list[ReceiptLine] = []
        parcels: list[ShippableItem] = []
        settlements = []

        for item in cart.items:
            product = products.get(str(item.product_id))
            if product is None:
                raise ValidationError({"product": [f"Product {item.product_id} not found"]})
            if product.is_expired(today):
                raise ValidationError({"product": [f"{product.name} is expired"]})
            if item.quantity > product.quantity:
                raise ValidationError({"quantity": [f"{product.name} out of stock"]})

            lines.append(ReceiptLine(product_name=product.name, quantity=item.quantity, unit_price=product.price))
            settlements.append((product, item.quantity))

            if product.is_shippable:
                parcels.extend(ShippableItem(name=product.name, weight=product.weight_kg) for _ in range(item.quantity))

        subtotal = sum(line.line_total for line in lines)
        amount = subtotal + self.shipping_fee

        if not customer.can_afford(amount):
            logger.warning(
                "Checkout declined",
                cart_id=str(cart.id),
                customer_id=str(customer.id),
                amount=amount,
                balance=customer.balance,
            )
            raise ValidationError({"balance": ["Insufficient balance"]})

        for product, quantity in settlements:
            product.reduce_stock(quantity)
        if amount > 0:
            customer.pay(amount)
        cart.check_out(customer.id, amount)

        shipment = None
        if parcels:
            shipper = self.shipper if self.shipper is not None else get_shipper()
            shipment = shipper.ship(parcels)

        logger.info(
            "Checkout completed",
            cart_id=str(cart.id),
            customer_id=str(customer.id),
            subtotal=subtotal,
            amount=amount,
            shipped_units=len(parcels),
        )

        return Receipt(
            lines=tuple(lines),
            subtotal=subtotal,
            shipping_fee=self.shipping_fee,
            amount=amount,
            remaining_balance=customer.balance,
            shipment=shipment,
        )
