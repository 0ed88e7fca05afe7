"""Domain events for the User aggregate."""

from protean.fields import Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="User")
class UserRegistered:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    username = String(required=True)
    role = String(required=True)


@marketplace.event(part_of="User")
class UserActivated:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    username = String(required=True)


@marketplace.event(part_of="User")
class UserDeactivated:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    username = String(required=True)
