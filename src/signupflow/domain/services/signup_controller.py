"""Signup controller.

Owns the state of one signup form, derives its validity from the
password rules, drives a single submission at a time and maps the
result to a user-facing outcome.

State machine:
    IDLE --submit(valid)--> SUBMITTING --success--> SUCCEEDED (terminal)
    SUBMITTING --failure--> IDLE
    IDLE --submit(invalid)--> IDLE (rejected, nothing happens)
"""

import asyncio
import uuid
from typing import Any, Callable

from signupflow.core.hooks import FormEvent, HookRegistry
from signupflow.core.hooks.hook_registry import Listener
from signupflow.core.logging import LoggingContext, get_logger
from signupflow.domain.entities.form_state import FormSnapshot, FormState, SubmissionStatus
from signupflow.domain.entities.password_rule import ValidationResult
from signupflow.domain.entities.signup_outcome import SignupFailure, SignupOutcome
from signupflow.domain.exceptions import SignupTransportError
from signupflow.domain.services.password_validator import (
    PasswordValidator,
    default_password_validator,
)
from signupflow.domain.services.response_classifier import classify_response, transport_failure
from signupflow.infrastructure.signup.signup_gateway import SignupGateway

logger = get_logger(__name__)


class SignupController:
    """Controller for the account-creation form.

    All failures are recovered into ``last_error``; no exception raised by
    the gateway or by a listener escapes this class.

    Example:
        controller = SignupController(
            HttpSignupClient(get_settings()),
            on_account_created=lambda: print("created"),
        )
        controller.set_username("alice")
        controller.set_password("Abcdefghi1")
        outcome = await controller.submit()
    """

    def __init__(
        self,
        gateway: SignupGateway,
        validator: PasswordValidator = default_password_validator,
        registry: HookRegistry | None = None,
        on_account_created: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize the controller with an empty form.

        Args:
            gateway: Collaborator that performs the signup request.
            validator: Password rule engine.
            registry: Listener registry; a private one is created if omitted.
            on_account_created: Called once, with no arguments, after a 2xx response.
        """
        self.gateway = gateway
        self.validator = validator
        self.registry = registry if registry is not None else HookRegistry()
        self._state = FormState()

        if on_account_created is not None:
            self.registry.register(
                FormEvent.ON_ACCOUNT_CREATED,
                lambda event, snapshot, data: on_account_created(),
            )

    # Field access

    @property
    def username(self) -> str:
        return self._state.username

    @property
    def password(self) -> str:
        return self._state.password

    @property
    def submission_status(self) -> SubmissionStatus:
        return self._state.submission_status

    @property
    def last_error(self) -> str | None:
        return self._state.last_error

    @property
    def validation(self) -> ValidationResult:
        """Rule evaluation for the current password, recomputed on each access."""
        return self.validator.validate(self._state.password)

    @property
    def unmet_rules(self) -> list[str]:
        """Descriptions of unmet rules; all of them while the password is empty."""
        return self.validation.messages

    @property
    def visible_rule_messages(self) -> list[str]:
        """Unmet rules to display, hidden until the user starts typing."""
        if not self._state.password:
            return []
        return self.unmet_rules

    @property
    def is_username_valid(self) -> bool:
        return bool(self._state.username.strip())

    @property
    def is_password_valid(self) -> bool:
        return self.validation.is_valid

    @property
    def is_submitting(self) -> bool:
        return self._state.submission_status == SubmissionStatus.SUBMITTING

    def snapshot(self) -> FormSnapshot:
        """Get a read-only view of the form for rendering."""
        return FormSnapshot(
            username=self._state.username,
            password=self._state.password,
            submission_status=self._state.submission_status,
            last_error=self._state.last_error,
            unmet_rules=tuple(self.unmet_rules),
            can_submit=self.can_submit(),
        )

    # Observers

    def subscribe(self, callback: Listener, event: str = FormEvent.ON_CHANGE) -> str:
        """Register a listener; see HookRegistry.register."""
        return self.registry.register(event, callback)

    def unsubscribe(self, listener_id: str) -> bool:
        return self.registry.unregister(listener_id)

    def _emit(self, event: str, **data: Any) -> None:
        self.registry.emit(event, self.snapshot(), **data)

    # User input

    def set_username(self, value: str) -> None:
        """Update the username. Accepted in every status."""
        self._state.username = value
        self._emit(FormEvent.ON_CHANGE)

    def set_password(self, value: str) -> None:
        """Update the password. Accepted in every status."""
        self._state.password = value
        self._emit(FormEvent.ON_CHANGE)

    # Submission

    def can_submit(self) -> bool:
        """Check if a submission would be accepted now.

        Requires an idle form, a non-blank username and a valid password.
        SUCCEEDED is terminal, so a finished form cannot be resubmitted.
        """
        return (
            self._state.submission_status == SubmissionStatus.IDLE
            and self.is_username_valid
            and self.is_password_valid
        )

    async def submit(self) -> SignupOutcome | None:
        """Submit the form once.

        Returns:
            None if the form cannot be submitted (nothing changes and the
            gateway is not called), otherwise the SignupSuccess or
            SignupFailure of this attempt.
        """
        if not self.can_submit():
            logger.debug(
                "Submission rejected",
                submission_status=self._state.submission_status.value,
                username_valid=self.is_username_valid,
                unmet_rule_count=len(self.unmet_rules),
            )
            return None

        submission_id = f"sub_{uuid.uuid4().hex[:12]}"
        with LoggingContext(submission_id=submission_id):
            return await self._run_submission()

    async def _run_submission(self) -> SignupOutcome:
        # Captured up front; edits made while submitting don't alter the request
        username = self._state.username
        password = self._state.password

        self._state.last_error = None
        self._state.submission_status = SubmissionStatus.SUBMITTING
        self._emit(FormEvent.ON_SUBMIT_STARTED)
        self._emit(FormEvent.ON_CHANGE)

        logger.info("Submitting signup", username=username)

        outcome: SignupOutcome
        try:
            response = await self.gateway.create_user(username, password)
        except asyncio.CancelledError:
            # The host tore down the task; leave the form resubmittable
            logger.warning("Signup submission cancelled")
            self._state.submission_status = SubmissionStatus.IDLE
            self._emit(FormEvent.ON_CHANGE)
            raise
        except SignupTransportError as e:
            logger.warning("Signup transport failure", error=e.message)
            outcome = transport_failure()
        except Exception as e:
            logger.error(
                "Signup gateway raised unexpectedly",
                error_type=type(e).__name__,
                error=str(e),
            )
            outcome = transport_failure()
        else:
            outcome = classify_response(response)

        if isinstance(outcome, SignupFailure):
            self._fail(outcome)
        else:
            self._succeed(outcome.status_code)

        return outcome

    def _fail(self, failure: SignupFailure) -> None:
        self._state.last_error = failure.message
        self._state.submission_status = SubmissionStatus.IDLE

        logger.info(
            "Signup failed",
            error_kind=failure.kind.value,
            status_code=failure.status_code,
        )

        self._emit(FormEvent.ON_SUBMIT_FAILED, failure=failure)
        self._emit(FormEvent.ON_CHANGE)

    def _succeed(self, status_code: int) -> None:
        self._state.last_error = None
        self._state.submission_status = SubmissionStatus.SUCCEEDED

        logger.info("Account created", status_code=status_code)

        self._emit(FormEvent.ON_CHANGE)
        self._emit(FormEvent.ON_ACCOUNT_CREATED)
