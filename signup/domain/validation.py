"""
Registration validation - Ordered field rules with per-field bail.

Each field has an explicit, ordered tuple of rules. A rule is a plain
function taking the submitted value and returning an error code, or None
when the value passes. For every field the first failing rule wins and the
remaining rules for that field are skipped.

Fields are checked in a fixed order (username, email, password) and the
resulting mapping keeps that order, so a response lists errors the same way
every time.

Error codes are locale-agnostic; translating them to messages is the job of
the HTTP boundary.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

from .ports import AccountRepository

Rule = Callable[[Any], str | None]

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

# ASCII classes only; upper and lower case are separate requirements.
_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])", re.DOTALL)


def required(code: str) -> Rule:
    """Fail with `code` unless the value is a non-empty string."""

    def rule(value: Any) -> str | None:
        if not isinstance(value, str) or value == "":
            return code
        return None

    return rule


def length_between(minimum: int, maximum: int | None, code: str) -> Rule:
    """Fail with `code` when len(value) is outside [minimum, maximum]."""

    def rule(value: str) -> str | None:
        if len(value) < minimum:
            return code
        if maximum is not None and len(value) > maximum:
            return code
        return None

    return rule


def valid_email(code: str) -> Rule:
    """
    Fail with `code` when the value is not a syntactically valid address.

    Syntax only: special-use domains such as .test or .local are accepted,
    but the domain must still contain a dot.
    """

    def rule(value: str) -> str | None:
        try:
            validated = validate_email(
                value, check_deliverability=False, globally_deliverable=False
            )
        except EmailNotValidError:
            return code
        if "." not in validated.ascii_domain:
            return code
        return None

    return rule


def matches(pattern: re.Pattern[str], code: str) -> Rule:
    """Fail with `code` when the pattern does not match."""

    def rule(value: str) -> str | None:
        return None if pattern.search(value) else code

    return rule


def not_registered(repository: AccountRepository, code: str) -> Rule:
    """Fail with `code` when an account already uses this email."""

    def rule(value: str) -> str | None:
        return code if repository.find_by_email(value) is not None else None

    return rule


def first_failure(value: Any, rules: Sequence[Rule]) -> str | None:
    """Run rules in order and return the first error code, if any."""
    for rule in rules:
        code = rule(value)
        if code is not None:
            return code
    return None


USERNAME_RULES: tuple[Rule, ...] = (
    required("username_null"),
    length_between(USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH, "username_size"),
)

PASSWORD_RULES: tuple[Rule, ...] = (
    required("password_null"),
    length_between(PASSWORD_MIN_LENGTH, None, "password_size"),
    matches(_PASSWORD_PATTERN, "password_pattern"),
)


@dataclass
class RegistrationValidator:
    """
    Validates a registration payload against the account store.

    The email uniqueness rule is the only rule that performs I/O; it runs
    last for its field so malformed addresses never reach the store.
    """

    repository: AccountRepository

    def field_rules(self) -> tuple[tuple[str, tuple[Rule, ...]], ...]:
        email_rules = (
            required("email_null"),
            valid_email("email_not_valid"),
            not_registered(self.repository, "email_inuse"),
        )
        return (
            ("username", USERNAME_RULES),
            ("email", email_rules),
            ("password", PASSWORD_RULES),
        )

    def validate(self, username: Any, email: Any, password: Any) -> dict[str, str]:
        """
        Validate all fields.

        Returns:
            Mapping of field name to error code, in username, email,
            password order. Empty when the payload is valid.
        """
        values = {"username": username, "email": email, "password": password}
        errors: dict[str, str] = {}
        for field, rules in self.field_rules():
            code = first_failure(values[field], rules)
            if code is not None:
                errors[field] = code
        return errors
