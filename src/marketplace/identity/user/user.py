"""User aggregate: staff accounts (administrators, vendors and CSRs)."""

from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, String, Text

from marketplace.domain import marketplace
from marketplace.identity.shared.passwords import hash_password, verify_password
from marketplace.identity.user.events import UserActivated, UserDeactivated, UserRegistered
from marketplace.shared.ids import new_object_id


class UserRole(Enum):
    ADMIN = "Admin"
    VENDOR = "Vendor"
    CSR = "CSR"


@marketplace.aggregate(limit=None)
class User:
    username = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255)
    mobile_number = String(required=True, max_length=30)
    address = Text(required=True)
    role = String(required=True, choices=UserRole)
    is_active = Boolean(default=True)

    @classmethod
    def register(cls, username, email, password, mobile_number, address, role):
        if role not in {r.value for r in UserRole}:
            raise ValidationError({"role": ["Role must be one of Admin, Vendor or CSR"]})

        user = cls(
            id=new_object_id(),
            username=username,
            email=email.strip().lower(),
            password_hash=hash_password(password),
            mobile_number=mobile_number,
            address=address,
            role=role,
            is_active=True,
        )
        user.raise_(UserRegistered(user_id=str(user.id), email=user.email, username=user.username, role=role))
        return user

    def check_password(self, password):
        return verify_password(password, self.password_hash)

    def update_profile(self, username, mobile_number, address, password=None):
        self.username = username
        self.mobile_number = mobile_number
        self.address = address
        if password:
            self.password_hash = hash_password(password)

    def activate(self):
        self.is_active = True
        self.raise_(UserActivated(user_id=str(self.id), email=self.email, username=self.username))

    def deactivate(self):
        self.is_active = False
        self.raise_(UserDeactivated(user_id=str(self.id), email=self.email, username=self.username))
