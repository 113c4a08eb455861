"""Password rule entities.

A PasswordRule is an independent, named predicate a password must satisfy.
A ValidationResult is derived from a password and a rule list on demand and
is never stored.
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class PasswordRule:
    """A single password requirement.

    Attributes:
        id: Unique machine-readable identifier (e.g. 'min-length').
        description: Human-readable requirement shown while it is unmet.
        predicate: Returns True when the password satisfies the rule.
    """

    id: str
    description: str
    predicate: Callable[[str], bool]

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Rule ID is required")
        if not self.description:
            raise ValueError("Rule description is required")

    def check(self, password: str) -> bool:
        """Evaluate the rule against a password."""
        return bool(self.predicate(password))


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of evaluating every rule against one password.

    Attributes:
        unmet_rules: Failing rules, in rule declaration order.
        is_valid: True only when no rule is unmet and the password is non-empty.
    """

    unmet_rules: tuple[PasswordRule, ...]
    is_valid: bool

    @property
    def messages(self) -> list[str]:
        """Descriptions of the unmet rules."""
        return [rule.description for rule in self.unmet_rules]
