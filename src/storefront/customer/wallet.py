"""Customer registration and balance: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from storefront.customer.customer import Customer
from storefront.domain import storefront


@storefront.command(part_of="Customer")
class RegisterCustomer:
    name: String(required=True, max_length=100)
    balance: Float(default=0.0, min_value=0.0)


@storefront.command(part_of="Customer")
class TopUpBalance:
    """Add funds to a customer's balance."""

    customer_id: Identifier(required=True)
    amount: Float(required=True)


@storefront.command_handler(part_of=Customer)
class ManageWalletHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(name=command.name, balance=command.balance)
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(TopUpBalance)
    def top_up_balance(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.top_up(command.amount)
        repo.add(customer)
