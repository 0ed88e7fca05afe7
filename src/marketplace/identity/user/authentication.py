"""Staff login."""

import structlog
from protean.utils.globals import current_domain

from marketplace.identity.shared.tokens import get_token_service
from marketplace.identity.user.user import User
from marketplace.shared.errors import AuthenticationError, PermissionDenied

logger = structlog.get_logger(__name__)


def login_user(email: str, password: str) -> tuple[str, User]:
    """Check credentials and return a signed token with the user.

    Raises AuthenticationError for unknown emails or wrong passwords, and
    PermissionDenied for deactivated accounts.
    """
    user = current_domain.repository_for(User).find_by_email(email or "")
    if user is None or not user.check_password(password):
        logger.info("Login rejected", email=email)
        raise AuthenticationError("Invalid email or password")

    if not user.is_active:
        raise PermissionDenied("Your account has been deactivated")

    token = get_token_service().issue(subject_id=str(user.id), email=user.email, role=user.role, username=user.username)
    return token, user
