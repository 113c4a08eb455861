"""Discriminated result of a signup submission."""

from dataclasses import dataclass
from typing import Literal, Union

from signupflow.domain.exceptions import EXCEPTION_BY_KIND, SignupError, SignupErrorKind


@dataclass(frozen=True)
class SignupSuccess:
    """The endpoint accepted the signup with a 2xx status."""

    status_code: int
    ok: Literal[True] = True


@dataclass(frozen=True)
class SignupFailure:
    """A failed submission, already mapped to a user-facing message.

    Attributes:
        kind: Error category.
        message: Text to display to the user.
        status_code: HTTP status, or None when no response was received.
    """

    kind: SignupErrorKind
    message: str
    status_code: int | None = None
    ok: Literal[False] = False

    def to_exception(self) -> SignupError:
        """Build the matching SignupError subclass for hosts that raise."""
        return EXCEPTION_BY_KIND[self.kind](self.message)


SignupOutcome = Union[SignupSuccess, SignupFailure]
