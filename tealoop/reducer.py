"""Reducers: pure state transitions for the tealoop programs.

A reducer takes the current State and one Message and returns a
``Transition``: the next State, an optional Command to launch, and whether
the loop should stop. Reducers never raise on Message input and never touch
I/O; errors arrive as ``Failure`` payloads and are stored as data.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from tealoop.commands import Command
from tealoop.constants import (
    CANCEL_KEYS,
    DEFAULT_BLINK_INTERVAL,
    DOWN_KEYS,
    FILTER_KEY,
    QUIT_KEY,
    UP_KEYS,
)
from tealoop.messages import (
    BlinkTick,
    CommandCompleted,
    Failure,
    FileListResult,
    KeyInput,
    Quit,
    StatusResult,
)
from tealoop.state import LibraryState, ProbeState
from tealoop.widgets import text_input


@dataclass(frozen=True)
class Transition:
    """Result of one reducer step."""

    state: Any
    command: Optional[Command] = None
    stop: bool = False


@dataclass(frozen=True)
class CompletionPolicy:
    """Whether a finished Command ends the program.

    Attributes:
        stop_on_success: Stop after a successful result payload
        stop_on_failure: Stop after a Failure payload
    """

    stop_on_success: bool = False
    stop_on_failure: bool = False


# One-shot check: report and exit either way
PROBE_POLICY = CompletionPolicy(stop_on_success=True, stop_on_failure=True)

# Interactive browser: keep running after the scan
LIBRARY_POLICY = CompletionPolicy(stop_on_success=False, stop_on_failure=False)


def reduce_probe(
    state: ProbeState,
    message: object,
    policy: CompletionPolicy = PROBE_POLICY,
) -> Transition:
    """Next state of the HTTP probe.

    Args:
        state: Current probe state
        message: Message to apply
        policy: Completion policy

    Returns:
        Transition for the loop
    """
    if isinstance(message, Quit):
        return Transition(state, stop=True)

    if isinstance(message, KeyInput):
        if message.key in CANCEL_KEYS or message.key == QUIT_KEY:
            return Transition(state, stop=True)
        return Transition(state)

    if isinstance(message, CommandCompleted):
        payload = message.payload
        if isinstance(payload, StatusResult):
            state = replace(state, status=payload.code, error=None, loading=False)
            return Transition(state, stop=policy.stop_on_success)
        if isinstance(payload, Failure):
            state = replace(state, error=payload.cause, loading=False)
            return Transition(state, stop=policy.stop_on_failure)

    return Transition(state)


def reduce_library(
    state: LibraryState,
    message: object,
    policy: CompletionPolicy = LIBRARY_POLICY,
    blink_interval: float = DEFAULT_BLINK_INTERVAL,
) -> Transition:
    """Next state of the PDF library browser.

    Args:
        state: Current library state
        message: Message to apply
        policy: Completion policy
        blink_interval: Cursor blink interval for the filter field

    Returns:
        Transition for the loop
    """
    if isinstance(message, Quit):
        return Transition(state, stop=True)

    if isinstance(message, KeyInput):
        return _library_key(state, message.key, blink_interval)

    if isinstance(message, CommandCompleted):
        payload = message.payload
        if isinstance(payload, FileListResult):
            state = replace(state, files=tuple(payload.names), error=None, loading=False)
            return Transition(_fit_cursor(state), stop=policy.stop_on_success)
        if isinstance(payload, Failure):
            state = replace(state, error=payload.cause, loading=False)
            return Transition(state, stop=policy.stop_on_failure)
        if isinstance(payload, BlinkTick):
            field, command = text_input.tick(state.filter, payload, blink_interval)
            return Transition(replace(state, filter=field), command)

    return Transition(state)


def _library_key(state: LibraryState, key: str, blink_interval: float) -> Transition:
    if key in CANCEL_KEYS:
        return Transition(state, stop=True)

    field = state.filter

    if field.focused:
        if key == "enter":
            return Transition(replace(state, filter=text_input.blur(field)))
        if key == "up":
            return Transition(_move(state, -1))
        if key == "down":
            return Transition(_move(state, 1))

        new_field, command = text_input.update(field, key, blink_interval)
        return Transition(_fit_cursor(replace(state, filter=new_field)), command)

    if key == QUIT_KEY:
        return Transition(state, stop=True)
    if key in UP_KEYS:
        return Transition(_move(state, -1))
    if key in DOWN_KEYS:
        return Transition(_move(state, 1))

    if key == FILTER_KEY and not state.loading and state.error is None:
        field, command = text_input.focus(field, blink_interval)
        return Transition(replace(state, filter=field), command)

    if key == "enter":
        visible = state.visible()
        if visible:
            return Transition(replace(state, selected=visible[state.cursor]))

    return Transition(state)


def _move(state: LibraryState, delta: int) -> LibraryState:
    """Move the cursor, clamped to the visible list."""
    last = len(state.visible()) - 1
    cursor = min(max(state.cursor + delta, 0), max(last, 0))
    if cursor == state.cursor:
        return state
    return replace(state, cursor=cursor)


def _fit_cursor(state: LibraryState) -> LibraryState:
    """Reset the cursor to the top when it no longer points into the list."""
    if state.cursor >= len(state.visible()):
        return replace(state, cursor=0)
    return state
