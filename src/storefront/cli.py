"""Storefront command-line entry point.

Runs the demonstration checkout: a laptop, two bottles of milk and a piece
of cheese bought by a single customer. The shipment notice (if any) is
printed first, then the receipt.

Usage:
    storefront demo                  # Default balance of 12000
    storefront demo --balance 500    # Shows the insufficient-balance path
"""

import argparse
import sys
from datetime import date, timedelta

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.cart.items import AddToCart, CreateCart
from storefront.catalogue.management import AddProduct
from storefront.checkout.receipt import Receipt
from storefront.checkout.settlement import CheckoutCart
from storefront.customer.wallet import RegisterCustomer
from storefront.domain import logger, storefront

DEMO_BALANCE = 12000.0


def error_message(exc: ValidationError) -> str:
    """Flatten a ValidationError's ``{field: [messages]}`` into one line."""
    messages = exc.messages if isinstance(exc.messages, dict) else {"error": [str(exc.messages)]}
    return "; ".join(str(message) for field_messages in messages.values() for message in field_messages)


def run_demo(balance: float = DEMO_BALANCE) -> Receipt:
    """Seed the catalogue, fill a cart and check it out.

    Must run inside an active storefront domain context.
    """
    today = date.today()

    def process(command):
        return current_domain.process(command, asynchronous=False)

    laptop = process(AddProduct(name="Laptop", price=10000, quantity=5, weight=2.5))
    milk = process(AddProduct(name="Milk", price=50, quantity=10, expires_on=today + timedelta(days=2)))
    cheese = process(
        AddProduct(name="Cheese", price=100, quantity=3, expires_on=today + timedelta(days=1), weight=0.5)
    )

    customer_id = process(RegisterCustomer(name="Ahmed", balance=balance))
    cart_id = process(CreateCart(customer_id=customer_id))

    process(AddToCart(cart_id=cart_id, product_id=laptop, quantity=1))
    process(AddToCart(cart_id=cart_id, product_id=milk, quantity=2))
    process(AddToCart(cart_id=cart_id, product_id=cheese, quantity=1))

    return process(CheckoutCart(cart_id=cart_id, customer_id=customer_id))


def demo(args) -> int:
    try:
        receipt = run_demo(balance=args.balance)
    except ValidationError as exc:
        logger.warning("Demo checkout failed", error=exc.messages)
        print(f"Error: {error_message(exc)}")
        return 1
    except ValueError as exc:
        logger.error("Invalid store settings", error=str(exc))
        print(f"Error: {exc}")
        return 1

    print(receipt)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Storefront checkout demo")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run the demonstration checkout")
    demo_parser.add_argument(
        "--balance",
        type=float,
        default=DEMO_BALANCE,
        help=f"Opening balance of the demo customer (default: {DEMO_BALANCE:.0f})",
    )

    args = parser.parse_args(argv)

    storefront.init()
    with storefront.domain_context():
        if args.command == "demo":
            return demo(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
