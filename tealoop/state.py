"""State models for the tealoop programs.

States are frozen: the reducers build a new value with
``dataclasses.replace`` instead of mutating, so a State handed to a
reducer or renderer can never change underneath it.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class TextInput:
    """State of a single-line text field.

    Attributes:
        value: Current text buffer
        position: Cursor position within ``value`` (0..len(value))
        focused: Whether keystrokes go to this field
        cursor_visible: Blink phase of the cursor
        blink_tag: Generation counter; blink ticks for older tags are stale
        placeholder: Text shown while ``value`` is empty
    """

    value: str = ""
    position: int = 0
    focused: bool = False
    cursor_visible: bool = True
    blink_tag: int = 0
    placeholder: str = ""


@dataclass(frozen=True)
class LibraryState:
    """State of the file library browser.

    Attributes:
        files: Names loaded by the listing Command
        cursor: Index into the visible (filtered) list
        loading: True until the listing Command reports back
        error: Last listing error, if any
        selected: Name chosen with enter
        filter: Filter text field narrowing the visible list
        suffix: File name suffix the listing matched (names the file kind)
    """

    files: tuple[str, ...] = ()
    cursor: int = 0
    loading: bool = True
    error: Optional[str] = None
    selected: Optional[str] = None
    filter: TextInput = field(default_factory=lambda: TextInput(placeholder="type to filter"))
    suffix: str = ".pdf"

    def visible(self) -> tuple[str, ...]:
        """Files matching the filter text (case-insensitive substring)."""
        needle = self.filter.value.lower()
        if not needle:
            return self.files
        return tuple(name for name in self.files if needle in name.lower())

    def kind(self) -> str:
        """Display label for the listed files, e.g. ``PDF`` for ``.pdf``."""
        return self.suffix.lstrip(".").upper() or "matching"


@dataclass(frozen=True)
class ProbeState:
    """State of the HTTP status probe."""

    url: str
    status: Optional[int] = None
    error: Optional[str] = None
    loading: bool = True
