"""Authentication token cub built through password validation and hashing."""

from __future__ import annotations

from uuid import uuid4

from pydantic import Field

from packages.arctic_fox.errors import validation_error
from packages.arctic_fox.fox import CubModel

from .hasher import CredentialHasher, hash_password, verify_password
from .policy import PasswordPolicy, validate_password


def _new_id() -> str:
    """Return a compact random identifier."""
    return uuid4().hex


class Token(CubModel):
    """Login identity carried through a container.

    ``userhash`` stays out of serialized payloads so rendering a token never
    exposes the stored hash.
    """

    id: str = Field(default_factory=_new_id)
    username: str = ""
    email: str = ""
    userhash: str = Field(default="", exclude=True, repr=False)

    def init(
        self,
        username: str,
        password: str,
        email: str,
        *,
        policy: PasswordPolicy | None = None,
        hasher: CredentialHasher | None = None,
    ) -> Token:
        """Return a populated copy after validating and hashing ``password``.

        Raises ``ValidationError`` for a rejected username, email or password
        and ``ServerError`` when hashing fails.
        """
        username = username.strip()
        email = email.strip()
        if not username:
            raise validation_error("username must be non-empty")
        if "@" not in email:
            raise validation_error("email must be a valid address: %r", email)
        validate_password(password, policy)
        return self.model_copy(
            update={
                "username": username,
                "email": email,
                "userhash": hash_password(password, hasher),
            }
        )

    def verify(self, password: str, *, hasher: CredentialHasher | None = None) -> bool:
        """Return whether ``password`` matches this token's stored hash."""
        return verify_password(password, self.userhash, hasher)
