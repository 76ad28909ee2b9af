"""
Bearer identity tokens.

Tokens are issued by the external identity provider; this service only
verifies them. Expected payload:
{
    "sub": "provider-uid",
    "email": "user@example.com",
    "exp": 1234567890,
    "iat": 1234567890
}
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError


class Identity(BaseModel):
    """Verified caller identity."""

    uid: str
    email: str


class TokenVerifier:
    """Verifies identity tokens signed with a shared secret."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", audience: str | None = None):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.audience = audience

    def verify(self, token: str) -> Identity | None:
        """Return the identity carried by ``token`` or None if it is invalid or expired."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                options={"verify_aud": self.audience is not None},
            )
            return Identity(uid=payload["sub"], email=payload["email"].lower())
        except (JWTError, KeyError, AttributeError, ValidationError):
            return None

    def issue(self, uid: str, email: str, expires_minutes: int = 60) -> str:
        """Sign a token the same way the provider does. Used by tooling and tests."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": uid,
            "email": email,
            "iat": now,
            "exp": now + timedelta(minutes=expires_minutes),
        }
        if self.audience:
            payload["aud"] = self.audience
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
