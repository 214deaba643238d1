"""
Signed, time-limited identity tokens.

Tokens are HS256 JWTs carrying the caller's identity claims plus issue
and expiry timestamps. Nothing is stored server-side: a token is valid
when its signature matches the secret and its expiry has not passed.
"""

import logging
import time
from typing import Any, Callable, Dict

import jwt

from app.core.errors import InvalidToken, TokenExpired

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60
REGISTERED_CLAIMS = ("iat", "exp")
IDENTITY_CLAIMS = ("username", "id")


class TokenService:
    """
    Issues and verifies identity tokens with a server-held secret.

    Attributes:
        ttl_seconds: Lifetime of issued tokens
        algorithm: JWT signing algorithm
    """

    def __init__(
        self,
        secret: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        algorithm: str = "HS256",
        clock: Callable[[], float] = time.time,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self.ttl_seconds = ttl_seconds
        self.algorithm = algorithm
        self._clock = clock

    def issue(self, claims: Dict[str, Any]) -> str:
        """
        Create a signed token for the given identity claims.

        Args:
            claims: Identity claims, at least username and id

        Returns:
            Encoded token expiring ttl_seconds after issuance
        """
        issued_at = int(self._clock())
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self.ttl_seconds
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Check a token's signature and expiry.

        Args:
            token: Encoded token

        Returns:
            The identity claims the token was issued with

        Raises:
            InvalidToken: Bad signature, malformed payload or missing claims
            TokenExpired: Current time is past the encoded expiry
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "verify_iat": False, "require": ["exp"]},
            )
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected token: {e.__class__.__name__}")
            raise InvalidToken() from e

        if any(claim not in payload for claim in IDENTITY_CLAIMS):
            raise InvalidToken()

        expiry = payload["exp"]
        if not isinstance(expiry, (int, float)):
            raise InvalidToken()
        if self._clock() > expiry:
            raise TokenExpired()

        return {key: value for key, value in payload.items() if key not in REGISTERED_CLAIMS}
