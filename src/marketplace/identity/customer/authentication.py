"""Customer login."""

from protean.utils.globals import current_domain

from marketplace.identity.customer.customer import Customer
from marketplace.identity.shared.tokens import get_token_service
from marketplace.shared.errors import AuthenticationError

CUSTOMER_ROLE = "Customer"


def login_customer(email: str, password: str) -> tuple[str, Customer]:
    """Check credentials and return a signed token with the customer.

    Unknown emails raise ObjectNotFoundError. Inactive accounts and wrong
    passwords raise AuthenticationError.
    """
    customer = current_domain.repository_for(Customer).get_by_email(email or "")

    if not customer.is_active:
        raise AuthenticationError("Customer account is not active")
    if not customer.check_password(password):
        raise AuthenticationError("Invalid email or password")

    token = get_token_service().issue(
        subject_id=str(customer.id),
        email=customer.email,
        role=CUSTOMER_ROLE,
        username=customer.full_name,
    )
    return token, customer
