"""RegisterCustomer: customer self sign-up.

A second registration with the same email is a conflict and leaves the
first record untouched. CSRs hear about the new customer through the
``CustomerRegistered`` event so they can activate the account.
"""

import structlog
from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.customer.customer import Customer
from marketplace.shared.errors import ConflictError

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Customer")
class RegisterCustomer:
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)
    full_name = String(max_length=150)
    mobile_number = String(max_length=30)
    address = Text()


@marketplace.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        repo = current_domain.repository_for(Customer)
        if repo.find_by_email(command.email) is not None:
            raise ConflictError("A customer with this email already exists", email=command.email)

        customer = Customer.register(
            email=command.email,
            password=command.password,
            full_name=command.full_name,
            mobile_number=command.mobile_number,
            address=command.address,
        )
        repo.add(customer)
        logger.info("Customer registered", customer_id=str(customer.id))
        return str(customer.id)
