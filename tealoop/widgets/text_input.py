"""Single-line text editing widget."""

from dataclasses import replace
from typing import Optional

from tealoop.commands import Command, blink_command
from tealoop.constants import DEFAULT_BLINK_INTERVAL
from tealoop.messages import BlinkTick
from tealoop.state import TextInput


def _restart_blink(field: TextInput, interval: float) -> tuple[TextInput, Command]:
    field = replace(field, cursor_visible=True, blink_tag=field.blink_tag + 1)
    return field, blink_command(field.blink_tag, interval)


def focus(field: TextInput, interval: float = DEFAULT_BLINK_INTERVAL) -> tuple[TextInput, Command]:
    """Give the field focus and start the cursor blinking."""
    return _restart_blink(replace(field, focused=True), interval)


def blur(field: TextInput) -> TextInput:
    """Drop focus; pending blink ticks become stale."""
    return replace(field, focused=False, cursor_visible=True, blink_tag=field.blink_tag + 1)


def update(
    field: TextInput,
    key: str,
    interval: float = DEFAULT_BLINK_INTERVAL,
) -> tuple[TextInput, Optional[Command]]:
    """Apply one keystroke to a focused field.

    Args:
        field: Current field state
        key: Decoded key name or printable character
        interval: Blink interval for the rescheduled cursor timer

    Returns:
        Tuple of (new field, blink Command or None). Keys the widget does
        not understand leave the field unchanged with no Command.
    """
    if not field.focused:
        return field, None

    value, position = field.value, field.position

    if key == "backspace":
        if position == 0:
            return field, None
        value = value[:position - 1] + value[position:]
        position -= 1
    elif key == "delete":
        if position >= len(value):
            return field, None
        value = value[:position] + value[position + 1:]
    elif key == "left":
        position = max(0, position - 1)
    elif key == "right":
        position = min(len(value), position + 1)
    elif key == "home":
        position = 0
    elif key == "end":
        position = len(value)
    elif len(key) == 1 and key.isprintable():
        value = value[:position] + key + value[position:]
        position += 1
    else:
        return field, None

    return _restart_blink(replace(field, value=value, position=position), interval)


def tick(
    field: TextInput,
    message: BlinkTick,
    interval: float = DEFAULT_BLINK_INTERVAL,
) -> tuple[TextInput, Optional[Command]]:
    """Toggle the cursor on a current blink tick and schedule the next one."""
    if not field.focused or message.tag != field.blink_tag:
        return field, None
    field = replace(field, cursor_visible=not field.cursor_visible)
    return field, blink_command(field.blink_tag, interval)
