"""RegisterUser: create a staff account.

Emails are unique across staff accounts. The welcome mail goes out from the
``UserRegistered`` handler and is best-effort.
"""

import structlog
from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.user import User
from marketplace.shared.errors import ConflictError

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="User")
class RegisterUser:
    username = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=128)
    mobile_number = String(required=True, max_length=30)
    address = Text(required=True)
    role = String(required=True, max_length=20)


@marketplace.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ConflictError("A user with this email already exists", email=command.email)

        user = User.register(
            username=command.username,
            email=command.email,
            password=command.password,
            mobile_number=command.mobile_number,
            address=command.address,
            role=command.role,
        )
        repo.add(user)
        logger.info("User registered", user_id=str(user.id), role=user.role)
        return str(user.id)
