"""Form state entities for the signup workflow."""

from dataclasses import dataclass, field
from enum import Enum


class SubmissionStatus(str, Enum):
    """Lifecycle of a signup submission.

    IDLE -> SUBMITTING -> SUCCEEDED is terminal.
    SUBMITTING -> IDLE after a failed attempt.
    """

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"


@dataclass
class FormState:
    """Mutable state owned by a single SignupController.

    Attributes:
        username: Raw username as typed.
        password: Raw password as typed.
        submission_status: Current lifecycle status.
        last_error: Message from the last failed attempt, if any.
    """

    username: str = ""
    password: str = ""
    submission_status: SubmissionStatus = SubmissionStatus.IDLE
    last_error: str | None = None


@dataclass(frozen=True)
class FormSnapshot:
    """Read-only view of the form for rendering.

    Attributes:
        username: Current username.
        password: Current password (masked in repr).
        submission_status: Current lifecycle status.
        last_error: Error message to display, if any.
        unmet_rules: Descriptions of unmet password rules, in declaration order.
        can_submit: Whether a submission would be accepted right now.
    """

    username: str
    password: str = field(repr=False)
    submission_status: SubmissionStatus
    last_error: str | None
    unmet_rules: tuple[str, ...]
    can_submit: bool

    @property
    def is_submitting(self) -> bool:
        return self.submission_status == SubmissionStatus.SUBMITTING

    @property
    def succeeded(self) -> bool:
        return self.submission_status == SubmissionStatus.SUCCEEDED
