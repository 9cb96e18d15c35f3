"""Password hashing and JWT signing/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from carrental.core.config import Settings

# Cost factor used when no explicit value is configured.
DEFAULT_BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """One-way bcrypt hashing with a fixed cost factor."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PasswordHasher":
        return cls(rounds=settings.BCRYPT_ROUNDS)

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Do not store plain passwords."""
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, plain_password: str, hashed: str) -> bool:
        """Verify a plain password against a stored hash."""
        pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


class TokenCodec:
    """Signs and verifies compact JWTs with a shared symmetric key."""

    def __init__(self, signing_key: str, algorithm: str, expire_minutes: int) -> None:
        self._signing_key = signing_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenCodec":
        return cls(
            signing_key=settings.JWT_SIGNATURE_KEY.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def sign(self, claims: dict[str, Any]) -> str:
        """Return a signed token for claims, stamped with iat and exp."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            **claims,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self._signing_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token; return its claims.
        Raises jwt.PyJWTError on invalid, malformed or expired tokens.
        """
        return jwt.decode(
            token,
            self._signing_key,
            algorithms=[self.algorithm],
            options={"require": ["exp", "iat"]},
        )
