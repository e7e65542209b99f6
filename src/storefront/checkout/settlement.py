"""Checkout: command and handler.

Loads the cart, its products and the paying customer, runs the
``CheckoutService`` and persists every aggregate it touched. The handler
returns the ``Receipt``.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.checkout.service import CheckoutService
from storefront.config import get_settings
from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.shipping import get_shipper


@storefront.command(part_of="Cart")
class CheckoutCart:
    """Settle a cart against a customer's balance."""

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class CheckoutHandler:
    @handle(CheckoutCart)
    def checkout_cart(self, command):
        cart_repo = current_domain.repository_for(Cart)
        customer_repo = current_domain.repository_for(Customer)
        product_repo = current_domain.repository_for(Product)

        cart = cart_repo.get(command.cart_id)
        customer = customer_repo.get(command.customer_id)
        products = {str(item.product_id): product_repo.get(item.product_id) for item in cart.items}

        service = CheckoutService(
            shipping_fee=get_settings().shipping_fee,
            shipper=get_shipper(),
        )
        receipt = service.checkout(customer, cart, products)

        for product in products.values():
            product_repo.add(product)
        customer_repo.add(customer)
        cart_repo.add(cart)

        return receipt
