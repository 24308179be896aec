"""
Bearer token issuing and verification.

Tokens are HS256 JWTs carrying only the user id (``sub``) and the issue and
expiry times. They are stateless: nothing is stored server-side, so a token
stays valid until it expires.
"""

from datetime import datetime, timedelta, timezone

import jwt

from .exceptions import InvalidTokenError
from .models import TokenClaims


class TokenService:
    """
    Service for signing and verifying bearer tokens.

    Usage:
        service = TokenService(secret_key="...")
        token = service.issue(user_id)
        claims = service.verify(token)
        claims.user_id == user_id  # True
    """

    DEFAULT_EXPIRE_DAYS = 7
    ALGORITHM = "HS256"

    def __init__(self, secret_key: str, expire_days: int = DEFAULT_EXPIRE_DAYS):
        if not secret_key:
            raise ValueError("Token secret key cannot be empty")
        self._secret_key = secret_key
        self._expire = timedelta(days=expire_days)

    def issue(self, user_id: str, expires_delta: timedelta | None = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: The user's id; the only identity the token carries
            expires_delta: Override for the default expiry window

        Returns:
            The encoded token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": user_id,
            "iat": now,
            "exp": now + (expires_delta or self._expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry.

        Returns:
            TokenClaims with the user id and timestamps

        Raises:
            InvalidTokenError: For a bad signature, a malformed token, missing
                claims or an expired token. The cases are not distinguished.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )
            user_id = payload["sub"]
            if not isinstance(user_id, str) or not user_id:
                raise InvalidTokenError()
            return TokenClaims(
                user_id=user_id,
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError() from e
