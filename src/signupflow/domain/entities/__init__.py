"""Domain entities for SignupFlow.

Entities are pure Python dataclasses with no dependencies on
infrastructure or external frameworks.
"""

from signupflow.domain.entities.form_state import FormSnapshot, FormState, SubmissionStatus
from signupflow.domain.entities.password_rule import PasswordRule, ValidationResult
from signupflow.domain.entities.signup_outcome import (
    SignupFailure,
    SignupOutcome,
    SignupSuccess,
)

__all__ = [
    "FormSnapshot",
    "FormState",
    "PasswordRule",
    "SignupFailure",
    "SignupOutcome",
    "SignupSuccess",
    "SubmissionStatus",
    "ValidationResult",
]
