"""Credential utilities producing the values containers carry."""

from .hasher import CredentialHasher, hash_password, verify_password
from .policy import DEFAULT_POLICY, PasswordPolicy, validate_password
from .token import Token

__all__ = [
    "DEFAULT_POLICY",
    "CredentialHasher",
    "PasswordPolicy",
    "Token",
    "hash_password",
    "validate_password",
    "verify_password",
]
