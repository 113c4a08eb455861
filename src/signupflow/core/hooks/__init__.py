"""Observer registry for form notifications.

Example usage:
    from signupflow.core.hooks import FormEvent, HookRegistry

    registry = HookRegistry()

    def on_created(event, snapshot, data):
        print(f"Welcome, {snapshot.username}")

    registry.register(FormEvent.ON_ACCOUNT_CREATED, on_created)
"""

from signupflow.core.hooks.hook_events import FormEvent, get_all_events, is_submission_event
from signupflow.core.hooks.hook_registry import EmitResult, HookRegistry, RegisteredHook

__all__ = [
    "HookRegistry",
    "RegisteredHook",
    "EmitResult",
    "FormEvent",
    "get_all_events",
    "is_submission_event",
]
