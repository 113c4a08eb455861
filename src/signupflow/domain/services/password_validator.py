"""Password validation service.

Evaluates a password against an ordered, immutable list of rules:
- Length between 10 and 24 characters
- No whitespace
- At least one digit
- At least one uppercase letter
- At least one lowercase letter

Every rule is evaluated for every input; the result lists all unmet rules
in declaration order.
"""

import re
from typing import Iterable

from signupflow.domain.entities.password_rule import PasswordRule, ValidationResult

MIN_LENGTH = 10
MAX_LENGTH = 24

_WHITESPACE = re.compile(r"\s")
_DIGIT = re.compile(r"[0-9]")
_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")

PASSWORD_RULES: tuple[PasswordRule, ...] = (
    PasswordRule(
        id="min-length",
        description=f"Password must be at least {MIN_LENGTH} characters long",
        predicate=lambda p: len(p) >= MIN_LENGTH,
    ),
    PasswordRule(
        id="max-length",
        description=f"Password must be at most {MAX_LENGTH} characters long",
        predicate=lambda p: len(p) <= MAX_LENGTH,
    ),
    PasswordRule(
        id="no-spaces",
        description="Password cannot contain spaces",
        predicate=lambda p: _WHITESPACE.search(p) is None,
    ),
    PasswordRule(
        id="has-number",
        description="Password must contain at least one number",
        predicate=lambda p: _DIGIT.search(p) is not None,
    ),
    PasswordRule(
        id="has-upper",
        description="Password must contain at least one uppercase letter",
        predicate=lambda p: _UPPERCASE.search(p) is not None,
    ),
    PasswordRule(
        id="has-lower",
        description="Password must contain at least one lowercase letter",
        predicate=lambda p: _LOWERCASE.search(p) is not None,
    ),
)


class PasswordValidator:
    """Validates passwords against an injected rule list.

    The validator holds no per-password state; every call recomputes
    the result from scratch.
    """

    def __init__(self, rules: Iterable[PasswordRule] = PASSWORD_RULES) -> None:
        """Initialize the password validator.

        Args:
            rules: Rules in display order (default PASSWORD_RULES).

        Raises:
            ValueError: If two rules share an id.
        """
        self.rules: tuple[PasswordRule, ...] = tuple(rules)

        seen: set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise ValueError(f"Duplicate password rule id: {rule.id}")
            seen.add(rule.id)

    def unmet_rules(self, password: str) -> list[PasswordRule]:
        """Get the rules a password fails.

        An empty password fails every rule, so all requirements can be
        shown before the user types anything.

        Args:
            password: The password to check.

        Returns:
            Unmet rules in declaration order.
        """
        if not password:
            return list(self.rules)

        # Evaluate all predicates before filtering so none is skipped
        results = [(rule, rule.check(password)) for rule in self.rules]
        return [rule for rule, passed in results if not passed]

    def evaluate(self, password: str) -> list[str]:
        """Get descriptions of the rules a password fails.

        Args:
            password: The password to check.

        Returns:
            Unmet rule descriptions in declaration order. Empty if valid.
        """
        return [rule.description for rule in self.unmet_rules(password)]

    def validate(self, password: str) -> ValidationResult:
        """Validate a password against every rule.

        Args:
            password: The password to validate.

        Returns:
            ValidationResult with unmet rules and overall validity.
        """
        unmet = tuple(self.unmet_rules(password))
        return ValidationResult(unmet_rules=unmet, is_valid=not unmet and bool(password))

    def is_valid(self, password: str) -> bool:
        """Check if a password is valid.

        Args:
            password: The password to validate.

        Returns:
            True if password meets all requirements, False otherwise.
        """
        return self.validate(password).is_valid


# Default validator instance
default_password_validator = PasswordValidator()
