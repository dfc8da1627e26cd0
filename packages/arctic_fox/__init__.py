"""Arctic Fox: freezable result containers, error taxonomy and credential helpers."""

from .auth import CredentialHasher, PasswordPolicy, Token, hash_password, validate_password, verify_password
from .errors import (
    ArcticFoxError,
    Forbidden,
    ServerError,
    Unauthorized,
    ValidationError,
    forbidden,
    server_error,
    unauthorized,
    validation_error,
)
from .fox import (
    AdoptedCub,
    ArcticFox,
    Cub,
    CubModel,
    Frozen,
    FrozenFoxError,
    Live,
    RenderedBody,
    adopt,
    bond,
    render,
    respond,
    run_many,
)

__all__ = [
    "AdoptedCub",
    "ArcticFox",
    "ArcticFoxError",
    "CredentialHasher",
    "Cub",
    "CubModel",
    "Forbidden",
    "Frozen",
    "FrozenFoxError",
    "Live",
    "PasswordPolicy",
    "RenderedBody",
    "ServerError",
    "Token",
    "Unauthorized",
    "ValidationError",
    "adopt",
    "bond",
    "forbidden",
    "hash_password",
    "render",
    "respond",
    "run_many",
    "server_error",
    "unauthorized",
    "validate_password",
    "validation_error",
    "verify_password",
]
