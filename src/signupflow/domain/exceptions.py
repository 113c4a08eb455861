"""Signup error taxonomy.

The controller never raises these across its boundary; it records the
message in its state instead. The exceptions exist for the transport
layer and for hosts that prefer raising (see SignupFailure.to_exception).
"""

from enum import Enum

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again."
AUTH_ERROR_MESSAGE = "Not authenticated to access this resource."
PASSWORD_NOT_ALLOWED_MESSAGE = (
    "Sorry, the entered password is not allowed, please try a different one."
)


class SignupErrorKind(str, Enum):
    """Categories of signup failure."""

    VALIDATION = "validation"
    AUTH = "auth"
    POLICY_REJECTED = "policy_rejected"
    SERVER = "server"


class SignupError(Exception):
    """Base class for signup failures.

    Args:
        message: Human-readable error message.
    """

    kind: SignupErrorKind = SignupErrorKind.SERVER

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PasswordPolicyError(SignupError):
    """Raised when the form fails local validation.

    Args:
        message: Summary message.
        unmet_rules: Descriptions of the rules the password fails.
    """

    kind = SignupErrorKind.VALIDATION

    def __init__(self, message: str, unmet_rules: list[str] | None = None) -> None:
        self.unmet_rules = unmet_rules or []
        super().__init__(message)


class AuthError(SignupError):
    """The endpoint rejected the configured credential (401/403)."""

    kind = SignupErrorKind.AUTH


class PolicyRejectionError(SignupError):
    """The endpoint rejected the chosen password (400, 'not allowed')."""

    kind = SignupErrorKind.POLICY_REJECTED


class ServerError(SignupError):
    """Any other failure, including unclassified HTTP statuses."""

    kind = SignupErrorKind.SERVER


class SignupTransportError(ServerError):
    """No usable HTTP response was received (network error, timeout)."""


EXCEPTION_BY_KIND: dict[SignupErrorKind, type[SignupError]] = {
    SignupErrorKind.VALIDATION: PasswordPolicyError,
    SignupErrorKind.AUTH: AuthError,
    SignupErrorKind.POLICY_REJECTED: PolicyRejectionError,
    SignupErrorKind.SERVER: ServerError,
}
