"""Customer aggregate.

Customers sign up themselves and start out inactive; a CSR activates them
before they can log in.
"""

from protean.exceptions import ValidationError
from protean.fields import Boolean, String, Text

from marketplace.domain import marketplace
from marketplace.identity.customer.events import CustomerActivated, CustomerDeactivated, CustomerRegistered
from marketplace.identity.shared.passwords import hash_password, verify_password
from marketplace.shared.ids import new_object_id


@marketplace.aggregate(limit=None)
class Customer:
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255)
    full_name = String(max_length=150)
    mobile_number = String(max_length=30)
    address = Text()
    is_active = Boolean(default=False)

    @classmethod
    def register(cls, email, password, full_name=None, mobile_number=None, address=None):
        customer = cls(
            id=new_object_id(),
            email=email.strip().lower(),
            password_hash=hash_password(password),
            full_name=full_name,
            mobile_number=mobile_number,
            address=address,
            is_active=False,
        )
        customer.raise_(CustomerRegistered(customer_id=str(customer.id), email=customer.email, full_name=customer.full_name))
        return customer

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    def update_profile(self, full_name=None, mobile_number=None, address=None):
        self.full_name = full_name
        self.mobile_number = mobile_number
        self.address = address

    def activate(self):
        if self.is_active:
            raise ValidationError({"is_active": ["Customer is already active"]})
        self.is_active = True
        self.raise_(CustomerActivated(customer_id=str(self.id), email=self.email, full_name=self.full_name))

    def deactivate(self):
        if not self.is_active:
            raise ValidationError({"is_active": ["Customer is already deactivated"]})
        self.is_active = False
        self.raise_(CustomerDeactivated(customer_id=str(self.id), email=self.email, full_name=self.full_name))
