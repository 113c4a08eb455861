"""Unit tests for the form listener registry.

Tests cover:
- Registration and unregistration
- Priority ordering
- Listener failure isolation
"""

from unittest.mock import MagicMock

import pytest

from signupflow.core.hooks import (
    FormEvent,
    HookRegistry,
    get_all_events,
    is_submission_event,
)
from signupflow.domain.entities import FormSnapshot, SubmissionStatus


@pytest.fixture
def snapshot() -> FormSnapshot:
    return FormSnapshot(
        username="alice",
        password="",
        submission_status=SubmissionStatus.IDLE,
        last_error=None,
        unmet_rules=(),
        can_submit=False,
    )


class TestHookRegistry:
    """Tests for the HookRegistry class."""

    def test_register_returns_unique_id(self) -> None:
        registry = HookRegistry()

        ids = {registry.register(FormEvent.ON_CHANGE, MagicMock()) for _ in range(10)}

        assert len(ids) == 10
        assert all(listener_id.startswith("listener_") for listener_id in ids)
        assert len(registry) == 10

    def test_register_unknown_event_fails(self) -> None:
        registry = HookRegistry()
        with pytest.raises(ValueError, match="Unknown form event"):
            registry.register("on_nothing", MagicMock())

    def test_emit_passes_event_snapshot_and_data(self, snapshot) -> None:
        registry = HookRegistry()
        listener = MagicMock()
        registry.register(FormEvent.ON_SUBMIT_FAILED, listener)

        result = registry.emit(FormEvent.ON_SUBMIT_FAILED, snapshot, failure="x")

        listener.assert_called_once_with(FormEvent.ON_SUBMIT_FAILED, snapshot, {"failure": "x"})
        assert result.delivered == 1
        assert result.success is True

    def test_emit_only_reaches_matching_event(self, snapshot) -> None:
        registry = HookRegistry()
        change = MagicMock()
        created = MagicMock()
        registry.register(FormEvent.ON_CHANGE, change)
        registry.register(FormEvent.ON_ACCOUNT_CREATED, created)

        registry.emit(FormEvent.ON_CHANGE, snapshot)

        change.assert_called_once()
        created.assert_not_called()

    def test_emit_without_listeners(self, snapshot) -> None:
        result = HookRegistry().emit(FormEvent.ON_CHANGE, snapshot)
        assert result.delivered == 0
        assert result.success is True

    def test_priority_then_fifo_order(self, snapshot) -> None:
        registry = HookRegistry()
        order: list[str] = []

        registry.register(FormEvent.ON_CHANGE, lambda e, s, d: order.append("low"), priority=-5)
        registry.register(FormEvent.ON_CHANGE, lambda e, s, d: order.append("first"))
        registry.register(FormEvent.ON_CHANGE, lambda e, s, d: order.append("high"), priority=10)
        registry.register(FormEvent.ON_CHANGE, lambda e, s, d: order.append("second"))

        registry.emit(FormEvent.ON_CHANGE, snapshot)

        assert order == ["high", "first", "second", "low"]

    def test_failing_listener_is_isolated(self, snapshot) -> None:
        registry = HookRegistry()
        after = MagicMock()
        failing_id = registry.register(
            FormEvent.ON_CHANGE, MagicMock(side_effect=RuntimeError("boom"))
        )
        registry.register(FormEvent.ON_CHANGE, after)

        result = registry.emit(FormEvent.ON_CHANGE, snapshot)

        after.assert_called_once()
        assert result.delivered == 1
        assert result.success is False
        assert result.errors == [f"Listener {failing_id} failed: boom"]

    def test_unregister(self, snapshot) -> None:
        registry = HookRegistry()
        listener = MagicMock()
        listener_id = registry.register(FormEvent.ON_CHANGE, listener)

        assert registry.unregister(listener_id) is True
        assert registry.get_hook_by_id(listener_id) is None
        assert registry.get_hooks_for_event(FormEvent.ON_CHANGE) == []

        registry.emit(FormEvent.ON_CHANGE, snapshot)
        listener.assert_not_called()

    def test_unregister_unknown_id(self) -> None:
        assert HookRegistry().unregister("listener_missing") is False

    def test_clear(self) -> None:
        registry = HookRegistry()
        registry.register(FormEvent.ON_CHANGE, MagicMock())
        registry.register(FormEvent.ON_ACCOUNT_CREATED, MagicMock())

        assert registry.clear() == 2
        assert len(registry) == 0


class TestFormEvents:
    def test_get_all_events(self) -> None:
        assert set(get_all_events()) == {
            FormEvent.ON_CHANGE,
            FormEvent.ON_SUBMIT_STARTED,
            FormEvent.ON_SUBMIT_FAILED,
            FormEvent.ON_ACCOUNT_CREATED,
        }

    def test_is_submission_event(self) -> None:
        assert is_submission_event(FormEvent.ON_ACCOUNT_CREATED) is True
        assert is_submission_event(FormEvent.ON_SUBMIT_STARTED) is True
        assert is_submission_event(FormEvent.ON_CHANGE) is False
