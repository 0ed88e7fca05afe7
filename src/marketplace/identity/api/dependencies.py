"""Bearer token dependencies for protected routes."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from marketplace.identity.shared.tokens import get_token_service
from marketplace.shared.errors import AuthenticationError, PermissionDenied

_bearer = HTTPBearer(auto_error=False)


def current_claims(credentials: HTTPAuthorizationCredentials | None = Depends(_bearer)) -> dict:
    """Claims of the caller's token. Missing or invalid tokens are a 401."""
    if credentials is None:
        raise AuthenticationError("Missing bearer token")
    return get_token_service().decode(credentials.credentials)


def require_role(*roles: str):
    """Dependency factory admitting only callers whose token carries one of ``roles``."""

    def _dependency(claims: dict = Depends(current_claims)) -> dict:
        if claims.get("role") not in roles:
            raise PermissionDenied(f"Requires one of the roles: {', '.join(roles)}")
        return claims

    return _dependency
