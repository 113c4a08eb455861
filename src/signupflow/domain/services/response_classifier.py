"""Classification of signup endpoint responses.

Maps an HTTP outcome to a SignupOutcome. Rules, in precedence order:
- 2xx: success
- 401/403: not authenticated
- 400 whose body message contains "not allowed": password rejected
- anything else: generic failure
"""

from signupflow.domain.entities.signup_outcome import (
    SignupFailure,
    SignupOutcome,
    SignupSuccess,
)
from signupflow.domain.exceptions import (
    AUTH_ERROR_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    PASSWORD_NOT_ALLOWED_MESSAGE,
    SignupErrorKind,
)
from signupflow.infrastructure.signup.signup_gateway import SignupResponse

AUTH_STATUS_CODES = frozenset({401, 403})
NOT_ALLOWED_MARKER = "not allowed"


def classify_response(response: SignupResponse) -> SignupOutcome:
    """Map a signup response to an outcome.

    Never raises: a missing or malformed body is treated as having no
    message.

    Args:
        response: The response returned by the signup gateway.

    Returns:
        SignupSuccess for 2xx, otherwise a SignupFailure.
    """
    status = response.status_code

    if response.is_success:
        return SignupSuccess(status_code=status)

    if status in AUTH_STATUS_CODES:
        return SignupFailure(
            kind=SignupErrorKind.AUTH,
            message=AUTH_ERROR_MESSAGE,
            status_code=status,
        )

    message = response.message
    if status == 400 and message is not None and NOT_ALLOWED_MARKER in message:
        return SignupFailure(
            kind=SignupErrorKind.POLICY_REJECTED,
            message=PASSWORD_NOT_ALLOWED_MESSAGE,
            status_code=status,
        )

    # 500, any other status, or an unparseable body
    return SignupFailure(
        kind=SignupErrorKind.SERVER,
        message=GENERIC_ERROR_MESSAGE,
        status_code=status,
    )


def transport_failure() -> SignupFailure:
    """Outcome for a submission that produced no HTTP response."""
    return SignupFailure(kind=SignupErrorKind.SERVER, message=GENERIC_ERROR_MESSAGE)
