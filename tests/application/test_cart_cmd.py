"""Application tests for cart commands."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart, CreateCart, RemoveFromCart
from storefront.catalogue.management import AddProduct


def _process(command):
    return current_domain.process(command, asynchronous=False)


@pytest.fixture()
def laptop_id():
    return _process(AddProduct(name="Laptop", price=10000, quantity=5, weight=2.5))


class TestCreateCartCommand:
    def test_create_cart(self):
        cart_id = _process(CreateCart(customer_id="cust-001"))
        cart = current_domain.repository_for(Cart).get(cart_id)
        assert str(cart.customer_id) == "cust-001"
        assert cart.is_empty

    def test_create_guest_cart(self):
        cart_id = _process(CreateCart())
        assert current_domain.repository_for(Cart).get(cart_id).customer_id is None


class TestAddToCartCommand:
    def test_add_item_persists(self, laptop_id):
        cart_id = _process(CreateCart())
        _process(AddToCart(cart_id=cart_id, product_id=laptop_id, quantity=2))
        cart = current_domain.repository_for(Cart).get(cart_id)
        assert len(cart.items) == 1
        assert cart.quantity_of(laptop_id) == 2

    def test_add_beyond_stock_fails(self, laptop_id):
        cart_id = _process(CreateCart())
        with pytest.raises(ValidationError):
            _process(AddToCart(cart_id=cart_id, product_id=laptop_id, quantity=6))
        assert current_domain.repository_for(Cart).get(cart_id).is_empty

    def test_zero_quantity_rejected_by_command(self, laptop_id):
        with pytest.raises(ValidationError):
            AddToCart(cart_id="cart-001", product_id=laptop_id, quantity=0)


class TestRemoveFromCartCommand:
    def test_remove_item_persists(self, laptop_id):
        cart_id = _process(CreateCart())
        _process(AddToCart(cart_id=cart_id, product_id=laptop_id, quantity=1))
        item_id = str(current_domain.repository_for(Cart).get(cart_id).items[0].id)

        _process(RemoveFromCart(cart_id=cart_id, item_id=item_id))

        assert current_domain.repository_for(Cart).get(cart_id).is_empty
