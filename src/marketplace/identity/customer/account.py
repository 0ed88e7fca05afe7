"""Customer account maintenance: profile, activation and removal."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.customer.customer import Customer


@marketplace.command(part_of="Customer")
class UpdateCustomer:
    customer_id = Identifier(required=True)
    full_name = String(max_length=150)
    mobile_number = String(max_length=30)
    address = Text()


@marketplace.command(part_of="Customer")
class ActivateCustomer:
    email = String(required=True, max_length=254)


@marketplace.command(part_of="Customer")
class DeactivateCustomer:
    email = String(required=True, max_length=254)


@marketplace.command(part_of="Customer")
class DeleteCustomer:
    email = String(required=True, max_length=254)


@marketplace.command_handler(part_of=Customer)
class CustomerAccountHandler:
    @handle(UpdateCustomer)
    def update_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get(command.customer_id)
        customer.update_profile(
            full_name=command.full_name,
            mobile_number=command.mobile_number,
            address=command.address,
        )
        repo.add(customer)

    @handle(ActivateCustomer)
    def activate_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get_by_email(command.email)
        customer.activate()
        repo.add(customer)

    @handle(DeactivateCustomer)
    def deactivate_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get_by_email(command.email)
        customer.deactivate()
        repo.add(customer)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.get_by_email(command.email)
        repo._dao.delete(customer)
