"""Form event definitions.

These are the notifications a SignupController publishes to its observers.
Adding new events is non-breaking; renaming or removing one is a breaking
change for embedding hosts.
"""


class FormEvent:
    """Form event names.

    Every listener receives the event name, a FormSnapshot taken right
    after the change, and a dict of event-specific data.
    """

    # Any change to username, password, status or last error
    ON_CHANGE = "on_change"

    # Submission lifecycle
    ON_SUBMIT_STARTED = "on_submit_started"
    ON_SUBMIT_FAILED = "on_submit_failed"  # data: {"failure": SignupFailure}
    ON_ACCOUNT_CREATED = "on_account_created"  # emitted at most once per controller


def get_all_events() -> list[str]:
    """Get a list of all form event names.

    Returns:
        List of event name strings.
    """
    return [
        value
        for name, value in vars(FormEvent).items()
        if name.startswith("ON_") and isinstance(value, str)
    ]


def is_submission_event(event: str) -> bool:
    """Check if an event belongs to the submission lifecycle.

    Args:
        event: Event name to check.

    Returns:
        True for submit started/failed and account created events.
    """
    return event in (
        FormEvent.ON_SUBMIT_STARTED,
        FormEvent.ON_SUBMIT_FAILED,
        FormEvent.ON_ACCOUNT_CREATED,
    )
