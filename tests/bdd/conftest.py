"""Shared BDD fixtures and step definitions for the checkout flow."""

from datetime import date, timedelta

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.customer.customer import Customer


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def today():
    return date.today()


@pytest.fixture()
def catalogue():
    """Products by name."""
    return {}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def outcome():
    """Container for the checkout receipt."""
    return {"receipt": None}


def _messages(exc):
    return [message for messages in exc.messages.values() for message in messages]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse(
        'a shippable product "{name}" priced {price:d} with {quantity:d} in stock weighing {weight:f} kg'
    )
)
def shippable_product(catalogue, name, price, quantity, weight):
    catalogue[name] = Product.create(name=name, price=price, quantity=quantity, weight=weight)


@given(
    parsers.cfparse('an expirable product "{name}" priced {price:d} with {quantity:d} in stock expiring in {days:d} days')
)
def expirable_product(catalogue, today, name, price, quantity, days):
    catalogue[name] = Product.create(
        name=name, price=price, quantity=quantity, expires_on=today + timedelta(days=days)
    )


@given(
    parsers.cfparse(
        'an expirable shippable product "{name}" priced {price:d} with {quantity:d} in stock '
        "expiring in {days:d} days weighing {weight:f} kg"
    )
)
def expirable_shippable_product(catalogue, today, name, price, quantity, days, weight):
    catalogue[name] = Product.create(
        name=name,
        price=price,
        quantity=quantity,
        expires_on=today + timedelta(days=days),
        weight=weight,
    )


@given(parsers.cfparse('a customer "{name}" with a balance of {balance:d}'), target_fixture="customer")
def _customer(name, balance):
    return Customer.register(name=name, balance=balance)


@given("an empty cart", target_fixture="cart")
def _cart():
    return Cart.create()


@given(parsers.cfparse('"{name}" expired yesterday'))
def expired_yesterday(catalogue, today, name):
    catalogue[name].expires_on = today - timedelta(days=1)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the checkout succeeds")
def checkout_succeeds(outcome, error):
    assert error["exc"] is None, f"Unexpected error: {error['exc']}"
    assert outcome["receipt"] is not None


@then(parsers.cfparse('the checkout fails with "{message}"'))
@then(parsers.cfparse('the cart action fails with "{message}"'))
def action_fails(error, message):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)
    assert message in _messages(error["exc"])


@then(parsers.cfparse("the customer balance is {balance:d}"))
def customer_balance(customer, balance):
    assert customer.balance == balance


@then(parsers.cfparse('"{name}" has {quantity:d} in stock'))
def product_stock(catalogue, name, quantity):
    assert catalogue[name].quantity == quantity
