"""Messages consumed by the reducers.

Every event the loop dispatches is one of the frozen dataclasses below.
Command outcomes travel inside ``CommandCompleted`` as one of the payload
variants.
"""

from dataclasses import dataclass
from typing import Union


# Command outcome payloads

@dataclass(frozen=True)
class StatusResult:
    """HTTP status code returned by the probe."""

    code: int


@dataclass(frozen=True)
class FileListResult:
    """Names found by the listing walk, in walk order."""

    names: tuple[str, ...]


@dataclass(frozen=True)
class Failure:
    """A Command failed; ``cause`` is the human-readable error."""

    cause: str


@dataclass(frozen=True)
class BlinkTick:
    """Cursor blink timer fired for the widget generation ``tag``."""

    tag: int


Payload = Union[StatusResult, FileListResult, Failure, BlinkTick]


# Messages

@dataclass(frozen=True)
class KeyInput:
    """A single decoded keystroke (``"up"``, ``"esc"``, ``"a"``...)."""

    key: str


@dataclass(frozen=True)
class CommandCompleted:
    """A Command finished with ``payload``."""

    payload: Payload


@dataclass(frozen=True)
class Quit:
    """Request loop termination."""


Message = Union[KeyInput, CommandCompleted, Quit]


def describe(message: object) -> dict:
    """Flatten a message into a JSON-friendly dict (for event logs).

    Args:
        message: Message to describe

    Returns:
        Dictionary with a ``type`` key plus the message fields
    """
    entry: dict = {"type": type(message).__name__}
    if isinstance(message, KeyInput):
        entry["key"] = message.key
    elif isinstance(message, CommandCompleted):
        entry["payload"] = type(message.payload).__name__
        payload = message.payload
        if isinstance(payload, StatusResult):
            entry["code"] = payload.code
        elif isinstance(payload, FileListResult):
            entry["count"] = len(payload.names)
        elif isinstance(payload, Failure):
            entry["cause"] = payload.cause
        elif isinstance(payload, BlinkTick):
            entry["tag"] = payload.tag
    return entry
