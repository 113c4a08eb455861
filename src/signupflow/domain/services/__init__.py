"""Domain services for SignupFlow.

Services contain the validation and submission logic of the signup form.
"""

from signupflow.domain.services.password_validator import (
    PASSWORD_RULES,
    PasswordValidator,
    default_password_validator,
)
from signupflow.domain.services.response_classifier import classify_response, transport_failure
from signupflow.domain.services.signup_controller import SignupController

__all__ = [
    "PASSWORD_RULES",
    "PasswordValidator",
    "SignupController",
    "classify_response",
    "default_password_validator",
    "transport_failure",
]
