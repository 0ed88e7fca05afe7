"""Staff account maintenance: profile updates, activation and removal."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.user import User


@marketplace.command(part_of="User")
class UpdateUser:
    user_id = Identifier(required=True)
    username = String(required=True, max_length=100)
    mobile_number = String(required=True, max_length=30)
    address = Text(required=True)
    password = String(max_length=128)


@marketplace.command(part_of="User")
class ActivateUser:
    user_id = Identifier(required=True)


@marketplace.command(part_of="User")
class DeactivateUser:
    user_id = Identifier(required=True)


@marketplace.command(part_of="User")
class DeleteUser:
    user_id = Identifier(required=True)


@marketplace.command_handler(part_of=User)
class UserAccountHandler:
    @handle(UpdateUser)
    def update_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_profile(
            username=command.username,
            mobile_number=command.mobile_number,
            address=command.address,
            password=command.password,
        )
        repo.add(user)

    @handle(ActivateUser)
    def activate_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.activate()
        repo.add(user)

    @handle(DeactivateUser)
    def deactivate_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.deactivate()
        repo.add(user)

    @handle(DeleteUser)
    def delete_user(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        repo._dao.delete(user)
