"""JWT issuance and verification.

Tokens carry ``email``, ``role``, ``username`` and ``id`` claims and expire
after the configured TTL (one hour by default).
"""

from datetime import UTC, datetime, timedelta

import jwt

from marketplace.config import AuthSettings, get_settings
from marketplace.shared.errors import AuthenticationError


class TokenService:
    def __init__(self, settings: AuthSettings) -> None:
        self.settings = settings

    def issue(self, subject_id: str, email: str, role: str, username: str | None = None) -> str:
        now = datetime.now(UTC)
        claims = {
            "id": str(subject_id),
            "email": email,
            "role": role,
            "username": username or email,
            "iat": now,
            "exp": now + timedelta(minutes=self.settings.token_ttl_minutes),
        }
        return jwt.encode(claims, self.settings.secret_key, algorithm=self.settings.algorithm)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(token, self.settings.secret_key, algorithms=[self.settings.algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired") from None
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token") from None


def get_token_service() -> TokenService:
    return TokenService(get_settings().auth)
