# Standard library imports
import time
from datetime import timedelta
from typing import Any, Dict, Mapping

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError as JwtInvalidTokenError

# Local application imports
from .exceptions import InvalidTokenError


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


class TokenCodec:
    """Signs and verifies short-lived JWTs carrying arbitrary claims"""

    def __init__(self, algorithm: str = "HS256") -> None:
        self.algorithm = algorithm

    def issue(self, claims: Mapping[str, Any], secret_key: str, ttl: timedelta) -> str:
        """
        Create a signed token that expires after ``ttl``

        Args:
            claims: Claims to embed in the token
            secret_key: Key used to sign the token
            ttl: Validity window of the token

        Returns:
            Encoded JWT token string
        """
        issued_at = int(time.time())
        expires_at = issued_at + int(ttl.total_seconds())

        token_payload = {
            **claims,
            "iat": issued_at,
            "exp": expires_at,
        }

        return jwt.encode(token_payload, secret_key, algorithm=self.algorithm)

    def verify(self, token: str, secret_key: str) -> Dict[str, Any]:
        """
        Decode and validate a token

        Args:
            token: The JWT token string to decode
            secret_key: Key the token was signed with

        Returns:
            Dictionary containing decoded token claims

        Raises:
            InvalidTokenError: If token is malformed, tampered or expired
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[self.algorithm])
        except JwtInvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")
