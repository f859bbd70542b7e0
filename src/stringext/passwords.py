"""Salted, iterated password hashing.

Passwords are run through PBKDF2-HMAC with a fresh 16-byte random salt. The
salt and the 20-byte derived key are stored together as one base64 string:

    base64( salt[0:16] || derived_key[16:36] )

This layout is persisted by callers in credential records and must not change.
"""

from __future__ import annotations

import base64
import binascii
import logging
import secrets
from dataclasses import dataclass

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from stringext.errors import FormatError, NullInputError

logger = logging.getLogger(__name__)

SALT_SIZE = 16
KEY_SIZE = 20
HASH_SIZE = SALT_SIZE + KEY_SIZE

DEFAULT_ITERATIONS = 10000

_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}


@dataclass(frozen=True)
class HashingConfig:
    """Configuration for password hashing.

    The same values must be used to verify a hash as were used to create it.
    """

    iterations: int = DEFAULT_ITERATIONS
    algorithm: str = "sha1"

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise ValueError(f"iterations must be an integer, got {self.iterations!r}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if self.algorithm not in _ALGORITHMS:
            raise ValueError(
                f"Unsupported algorithm: {self.algorithm}. "
                f"Supported: {sorted(_ALGORITHMS)}"
            )


@dataclass(frozen=True)
class PasswordHash:
    """A salt and the key derived from it."""

    salt: bytes
    derived_key: bytes

    def __post_init__(self):
        if len(self.salt) != SALT_SIZE:
            raise ValueError(f"salt must be {SALT_SIZE} bytes, got {len(self.salt)}")
        if len(self.derived_key) != KEY_SIZE:
            raise ValueError(f"derived_key must be {KEY_SIZE} bytes, got {len(self.derived_key)}")

    def to_bytes(self) -> bytes:
        return self.salt + self.derived_key

    def encode(self) -> str:
        """Serialize to the base64 storage format."""
        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def decode(cls, encoded: str) -> PasswordHash:
        """Deserialize from the base64 storage format.

        Raises:
            NullInputError: If encoded is None
            FormatError: If encoded is not base64 or not 36 bytes long
        """
        if encoded is None:
            raise NullInputError("encoded")

        # Surrounding whitespace, such as the newline a stored value keeps, is not part of the hash.
        try:
            raw = base64.b64decode(encoded.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise FormatError(encoded, "password hash", f"invalid base64 ({e})") from e

        if len(raw) != HASH_SIZE:
            raise FormatError(
                encoded,
                "password hash",
                f"decoded to {len(raw)} bytes, expected {HASH_SIZE}",
            )

        return cls(salt=raw[:SALT_SIZE], derived_key=raw[SALT_SIZE:])


class PasswordHasher:
    """Creates and verifies password hashes."""

    def __init__(self, config: HashingConfig | None = None) -> None:
        """Initialize hasher.

        Args:
            config: Hashing configuration (uses defaults if None)
        """
        self.config = config or HashingConfig()

    def hash(self, password: str, iterations: int | None = None) -> str:
        """Hash a password with a new random salt.

        Two calls with the same password return different strings.

        Args:
            password: Password to hash
            iterations: Override for the configured iteration count

        Returns:
            The encoded password hash

        Raises:
            NullInputError: If password is None
            ValueError: If iterations is less than 1
        """
        if password is None:
            raise NullInputError("password")

        rounds = self._iterations(iterations)
        salt = secrets.token_bytes(SALT_SIZE)
        key = self._kdf(salt, rounds).derive(_to_bytes(password))

        logger.debug(
            "Derived password hash (algorithm=%s, iterations=%d)",
            self.config.algorithm,
            rounds,
        )
        return PasswordHash(salt=salt, derived_key=key).encode()

    def verify(self, encoded: str, password: str, iterations: int | None = None) -> bool:
        """Verify a password against an encoded hash.

        A wrong password and a wrong iteration count both give False.

        Args:
            encoded: Hash produced by ``hash``
            password: Candidate password
            iterations: Override for the configured iteration count

        Returns:
            True if the password matches, False otherwise

        Raises:
            NullInputError: If encoded or password is None
            FormatError: If encoded is not a valid password hash
        """
        if password is None:
            raise NullInputError("password")

        stored = PasswordHash.decode(encoded)
        rounds = self._iterations(iterations)

        try:
            # Constant-time comparison of the derived keys
            self._kdf(stored.salt, rounds).verify(_to_bytes(password), stored.derived_key)
        except InvalidKey:
            logger.debug("Password hash verification failed")
            return False

        return True

    def _iterations(self, override: int | None) -> int:
        if override is None:
            return self.config.iterations
        if isinstance(override, bool) or not isinstance(override, int) or override < 1:
            raise ValueError(f"iterations must be an integer >= 1, got {override!r}")
        return override

    def _kdf(self, salt: bytes, iterations: int) -> PBKDF2HMAC:
        # PBKDF2HMAC instances are single-use
        return PBKDF2HMAC(
            algorithm=_ALGORITHMS[self.config.algorithm](),
            length=KEY_SIZE,
            salt=salt,
            iterations=iterations,
        )


def _to_bytes(password: str | bytes) -> bytes:
    if isinstance(password, bytes):
        return password
    return password.encode("utf-8")


# Default hasher instance for convenience
default_hasher = PasswordHasher()


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Hash a password with the default hasher.

    Example:
        >>> encoded = hash_password("password")
        >>> verify_password_hash(encoded, "password")
        True
    """
    return default_hasher.hash(password, iterations)


def verify_password_hash(
    encoded: str,
    password: str,
    iterations: int = DEFAULT_ITERATIONS,
) -> bool:
    """Verify a password against a hash created by ``hash_password``."""
    return default_hasher.verify(encoded, password, iterations)
