"""Domain events for the Customer aggregate."""

from protean.fields import Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Customer")
class CustomerRegistered:
    """A customer signed up and is waiting for activation."""

    __version__ = 1

    customer_id = Identifier(required=True)
    email = String(required=True)
    full_name = String()


@marketplace.event(part_of="Customer")
class CustomerActivated:
    __version__ = 1

    customer_id = Identifier(required=True)
    email = String(required=True)
    full_name = String()


@marketplace.event(part_of="Customer")
class CustomerDeactivated:
    __version__ = 1

    customer_id = Identifier(required=True)
    email = String(required=True)
    full_name = String()
