"""Argon2id credential hashing and verification.

Hashes are PHC-format strings that embed the algorithm parameters and the
per-call random salt, so verification needs no state besides the string
itself. Primitive failures surface as ``ServerError`` with a generic message;
the underlying diagnostic is logged, never returned.
"""

from __future__ import annotations

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from packages.arctic_fox.config import HasherSettings
from packages.arctic_fox.errors import codes, server_error
from packages.arctic_fox.logging import get_logger

_LOGGER = get_logger(__name__)


class CredentialHasher:
    """Salted, memory-hard password hashing with a configurable work factor.

    Salts come from the OS CSPRNG on every call, so one instance is safe to
    share across threads and concurrent container chains.
    """

    def __init__(self, settings: HasherSettings | None = None) -> None:
        self._settings = settings or HasherSettings()
        self._hasher = PasswordHasher(
            time_cost=self._settings.time_cost,
            memory_cost=self._settings.memory_cost,
            parallelism=self._settings.parallelism,
            hash_len=self._settings.hash_len,
            salt_len=self._settings.salt_len,
            type=Type.ID,
        )

    @classmethod
    def from_settings(cls, settings: HasherSettings) -> CredentialHasher:
        """Build a hasher from the typed ``hasher`` settings subtree."""
        return cls(settings)

    @property
    def settings(self) -> HasherSettings:
        return self._settings

    def hash(self, password: str) -> str:
        """Return an encoded Argon2id hash of ``password`` with a fresh salt."""
        try:
            return self._hasher.hash(password)
        except Exception as exc:
            _LOGGER.warning(
                "Password hashing failed: exception_type=%s",
                type(exc).__name__,
                exc_info=exc,
            )
            raise server_error(codes.ENCRYPTION_FAILED) from None

    def verify(self, password: str, stored_hash: str) -> bool:
        """Return whether ``password`` matches ``stored_hash``.

        A mismatch is ``False``. A malformed hash or any other verification
        failure is a ``ServerError``.
        """
        try:
            return self._hasher.verify(stored_hash, password)
        except VerifyMismatchError:
            return False
        except (VerificationError, InvalidHashError, TypeError) as exc:
            _LOGGER.warning(
                "Password verification failed: exception_type=%s",
                type(exc).__name__,
                exc_info=exc,
            )
            raise server_error(codes.VERIFICATION_FAILED) from None

    def needs_rehash(self, stored_hash: str) -> bool:
        """Return whether ``stored_hash`` uses parameters other than the current ones."""
        try:
            return self._hasher.check_needs_rehash(stored_hash)
        except (InvalidHashError, ValueError) as exc:
            _LOGGER.warning(
                "Stored hash could not be parsed: exception_type=%s",
                type(exc).__name__,
            )
            raise server_error(codes.VERIFICATION_FAILED) from None


_DEFAULT_HASHER = CredentialHasher()


def hash_password(password: str, hasher: CredentialHasher | None = None) -> str:
    """Hash ``password`` with ``hasher`` or the default hasher."""
    return (hasher or _DEFAULT_HASHER).hash(password)


def verify_password(
    password: str, stored_hash: str, hasher: CredentialHasher | None = None
) -> bool:
    """Verify ``password`` against ``stored_hash`` with ``hasher`` or the default."""
    return (hasher or _DEFAULT_HASHER).verify(password, stored_hash)
