"""Password strength validation.

Every rule is evaluated and every distinct violation is reported, in rule
order, as one newline-joined ``ValidationError``. Whitespace is the one
exception: a password containing whitespace is rejected with that violation
alone and no other rule is evaluated.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from packages.arctic_fox.config import DEFAULT_SYMBOLS, PasswordPolicySettings
from packages.arctic_fox.errors import validation_error
from packages.arctic_fox.logging import fields, get_logger, log_context

_LOGGER = get_logger(__name__)

WHITESPACE_VIOLATION = "Password must not contain spaces"
UPPERCASE_VIOLATION = "Password must contain at least one uppercase letter"
LOWERCASE_VIOLATION = "Password must contain at least one lowercase letter"
DIGIT_VIOLATION = "Password must contain at least one digit"


@dataclass(frozen=True)
class PasswordPolicy:
    """Configurable password strength rules."""

    min_length: int = 8
    max_length: int = 32
    max_repeat: int = 2
    symbols: frozenset[str] = frozenset(DEFAULT_SYMBOLS)

    @classmethod
    def from_settings(cls, settings: PasswordPolicySettings) -> PasswordPolicy:
        """Build a policy from the typed ``password`` settings subtree."""
        return cls(
            min_length=settings.min_length,
            max_length=settings.max_length,
            max_repeat=settings.max_repeat,
            symbols=frozenset(settings.symbols),
        )

    def violations(self, password: str) -> list[str]:
        """Return every distinct violated rule description, in rule order."""
        if any(char.isspace() for char in password):
            return [WHITESPACE_VIOLATION]

        found: list[str] = []
        if not self.min_length <= len(password) <= self.max_length:
            found.append(
                f"Password must be between {self.min_length} and {self.max_length} characters long"
            )
        if self._has_long_run(password):
            found.append(
                f"Password must not repeat the same character more than {self.max_repeat} times in a row"
            )

        if not any(char in string.ascii_uppercase for char in password):
            found.append(UPPERCASE_VIOLATION)
        if not any(char in string.ascii_lowercase for char in password):
            found.append(LOWERCASE_VIOLATION)
        if not any(char in string.digits for char in password):
            found.append(DIGIT_VIOLATION)
        if not any(char in self.symbols for char in password):
            found.append(
                f"Password must contain at least one symbol from: {self._symbol_list()}"
            )

        for char in password:
            if not self._is_allowed(char):
                found.append(f"Password contains an invalid character: {char!r}")

        return list(dict.fromkeys(found))

    def validate(self, password: str) -> None:
        """Raise ``ValidationError`` listing every violation; return ``None`` otherwise."""
        found = self.violations(password)
        if not found:
            return
        with log_context({fields.VIOLATION_COUNT: len(found)}):
            _LOGGER.debug("Password rejected by policy")
        raise validation_error("\n".join(found))

    def _has_long_run(self, password: str) -> bool:
        previous: str | None = None
        repeats = 0
        for char in password:
            if char == previous:
                repeats += 1
            else:
                previous = char
                repeats = 1
            if repeats > self.max_repeat:
                return True
        return False

    def _is_allowed(self, char: str) -> bool:
        return char in string.ascii_letters or char in string.digits or char in self.symbols

    def _symbol_list(self) -> str:
        return " ".join(sorted(self.symbols))


DEFAULT_POLICY = PasswordPolicy()


def validate_password(password: str, policy: PasswordPolicy | None = None) -> None:
    """Validate ``password`` against ``policy`` (the default policy when omitted)."""
    (policy or DEFAULT_POLICY).validate(password)
