"""Customer aggregate: a named shopper with a spendable balance."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String

from storefront.domain import storefront


@storefront.aggregate
class Customer:
    """A shopper whose balance settles checkouts.

    The balance never goes negative: ``pay`` refuses any amount the customer
    cannot cover.
    """

    name: String(required=True, max_length=100)
    balance: Float(default=0.0, min_value=0.0)
    registered_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, name, balance=0.0):
        from storefront.customer.events import CustomerRegistered

        now = datetime.now()
        customer = cls(name=name, balance=balance, registered_at=now)
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=customer.name,
                balance=customer.balance,
                registered_at=now,
            )
        )
        return customer

    def can_afford(self, amount) -> bool:
        return self.balance >= amount

    def pay(self, amount):
        from storefront.customer.events import CustomerCharged

        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})
        if not self.can_afford(amount):
            raise ValidationError({"balance": ["Insufficient balance"]})

        self.balance -= amount

        self.raise_(
            CustomerCharged(
                customer_id=self.id,
                amount=amount,
                remaining_balance=self.balance,
            )
        )

    def top_up(self, amount):
        from storefront.customer.events import BalanceToppedUp

        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})

        self.balance += amount

        self.raise_(
            BalanceToppedUp(
                customer_id=self.id,
                amount=amount,
                new_balance=self.balance,
            )
        )
