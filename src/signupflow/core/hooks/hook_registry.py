"""Listener registry - observer registration and dispatch.

The HookRegistry decouples the SignupController from whatever presents
its state. It provides:
- Registration of listeners per event with priority
- Dispatch in priority order, FIFO within the same priority
- Isolation of listener failures (logged, never propagated)
"""

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from signupflow.core.hooks.hook_events import get_all_events
from signupflow.core.logging import get_logger

if TYPE_CHECKING:
    from signupflow.domain.entities.form_state import FormSnapshot

logger = get_logger(__name__)

Listener = Callable[[str, "FormSnapshot", dict[str, Any]], Any]


@dataclass
class RegisteredHook:
    """Internal representation of a registered listener.

    Attributes:
        id: Unique identifier for this registration.
        event: The event this listener is registered for.
        callback: The callable to invoke.
        priority: Execution priority (higher = earlier).
        registration_order: Order in which this listener was registered.
    """

    id: str
    event: str
    callback: Listener
    priority: int = 0
    registration_order: int = 0


@dataclass
class EmitResult:
    """Result of dispatching an event.

    Attributes:
        event: The event that was emitted.
        delivered: Number of listeners that returned without raising.
        errors: Error messages from listeners that raised.
    """

    event: str
    delivered: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class HookRegistry:
    """Registry of form event listeners.

    Listeners are plain callables invoked synchronously, so state reads
    inside a listener always observe the state that triggered it.

    Example:
        registry = HookRegistry()

        def render(event, snapshot, data):
            print(snapshot.unmet_rules)

        listener_id = registry.register(FormEvent.ON_CHANGE, render)
        registry.emit(FormEvent.ON_CHANGE, snapshot)
        registry.unregister(listener_id)
    """

    def __init__(self) -> None:
        self._hooks: dict[str, list[RegisteredHook]] = {}
        self._registration_counter: int = 0
        self._hook_map: dict[str, RegisteredHook] = {}  # listener_id -> hook

    def register(self, event: str, callback: Listener, priority: int = 0) -> str:
        """Register a listener for an event.

        Args:
            event: Form event name (see FormEvent).
            callback: Callable accepting (event, snapshot, data).
            priority: Higher priority listeners run first. Default is 0.

        Returns:
            Unique listener id for later removal.

        Raises:
            ValueError: If the event name is unknown.
        """
        if event not in get_all_events():
            raise ValueError(f"Unknown form event: {event}")

        listener_id = f"listener_{uuid.uuid4().hex[:12]}"

        # FIFO ordering within same priority
        self._registration_counter += 1

        hook = RegisteredHook(
            id=listener_id,
            event=event,
            callback=callback,
            priority=priority,
            registration_order=self._registration_counter,
        )
        self._hooks.setdefault(event, []).append(hook)
        self._hook_map[listener_id] = hook

        logger.debug(
            "Listener registered",
            listener_id=listener_id,
            form_event=event,
            priority=priority,
        )

        return listener_id

    def unregister(self, listener_id: str) -> bool:
        """Remove a registered listener.

        Args:
            listener_id: The id returned from register().

        Returns:
            True if the listener was removed, False if not found.
        """
        hook = self._hook_map.pop(listener_id, None)
        if hook is None:
            logger.warning("Listener not found for unregister", listener_id=listener_id)
            return False

        remaining = [h for h in self._hooks.get(hook.event, []) if h.id != listener_id]
        if remaining:
            self._hooks[hook.event] = remaining
        else:
            self._hooks.pop(hook.event, None)

        logger.debug("Listener unregistered", listener_id=listener_id, form_event=hook.event)
        return True

    def emit(
        self,
        event: str,
        snapshot: "FormSnapshot",
        **data: Any,
    ) -> EmitResult:
        """Deliver an event to every listener registered for it.

        A listener that raises is logged and skipped; the remaining
        listeners still run.

        Args:
            event: Form event name.
            snapshot: Read-only view of the form at emission time.
            **data: Event-specific payload.

        Returns:
            EmitResult with delivery count and any listener errors.
        """
        result = EmitResult(event=event)

        hooks = self._hooks.get(event, [])
        if not hooks:
            return result

        sorted_hooks = sorted(hooks, key=lambda h: (-h.priority, h.registration_order))

        for hook in sorted_hooks:
            try:
                hook.callback(event, snapshot, data)
                result.delivered += 1
            except Exception as e:
                logger.error(
                    "Listener failed",
                    listener_id=hook.id,
                    form_event=event,
                    error=str(e),
                )
                result.errors.append(f"Listener {hook.id} failed: {e}")

        return result

    def get_hooks_for_event(self, event: str) -> list[RegisteredHook]:
        """Get all listeners registered for an event, in registration order."""
        return self._hooks.get(event, []).copy()

    def get_hook_by_id(self, listener_id: str) -> Optional[RegisteredHook]:
        return self._hook_map.get(listener_id)

    def clear(self) -> int:
        """Remove all registered listeners.

        Returns:
            Number of listeners removed.
        """
        count = len(self._hook_map)
        self._hooks.clear()
        self._hook_map.clear()
        return count

    def __len__(self) -> int:
        return len(self._hook_map)
