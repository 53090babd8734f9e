"""Renderers: turn a State into a rich Text frame.

Renderers are pure. Every reachable State (loading, empty list, error)
renders something; missing data becomes a placeholder line.
"""

from dataclasses import dataclass
from http import HTTPStatus

from rich.style import Style
from rich.text import Text

from tealoop.state import LibraryState, ProbeState, TextInput


@dataclass(frozen=True)
class Styles:
    """Styles used by the renderers."""

    selected: Style = Style(bold=True, color="color(212)", bgcolor="color(236)")
    normal: Style = Style()
    help: Style = Style(color="color(241)")
    loading: Style = Style(color="color(205)")
    error: Style = Style(color="color(196)")
    placeholder: Style = Style(color="color(241)", italic=True)
    cursor: Style = Style(reverse=True)


DEFAULT_STYLES = Styles()

LIBRARY_HELP = "Use up/down keys (or k/j) to navigate, / to filter, enter to select. Press q to quit."
FILTER_HELP = "Type to filter, up/down to navigate, enter to finish. Press esc to quit."


def _reason(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def render_text_input(field: TextInput, styles: Styles = DEFAULT_STYLES) -> Text:
    """Render a text field, with its cursor when focused."""
    text = Text()
    if not field.value and not field.focused:
        text.append(field.placeholder, style=styles.placeholder)
        return text

    value = field.value
    position = min(max(field.position, 0), len(value))
    text.append(value[:position])
    if field.focused:
        under_cursor = value[position:position + 1] or " "
        text.append(under_cursor, style=styles.cursor if field.cursor_visible else styles.normal)
        text.append(value[position + 1:])
    else:
        text.append(value[position:])
    return text


def render_library(state: LibraryState, styles: Styles = DEFAULT_STYLES) -> Text:
    """Render the file library browser."""
    text = Text()
    kind = state.kind()

    if state.loading:
        text.append(f"Scanning for {kind} files...", style=styles.loading)
        return text

    if state.error is not None:
        text.append(f"Error: {state.error}\n\n", style=styles.error)
        text.append("Press q to quit.", style=styles.help)
        return text

    text.append(f"Found {kind} files:\n\n")
    text.append("Filter: ")
    text.append_text(render_text_input(state.filter, styles))
    text.append("\n\n")

    visible = state.visible()
    if not state.files:
        text.append(f"No {kind} files found in the current directory.\n")
    elif not visible:
        text.append(f"No {kind} files match the filter.\n")
    else:
        for i, name in enumerate(visible):
            if i == state.cursor:
                text.append(f" > {name} ", style=styles.selected)
            else:
                text.append(f"   {name} ", style=styles.normal)
            text.append("\n")

    if state.selected is not None:
        text.append(f"\nSelected: {state.selected}\n")

    text.append("\n")
    text.append(FILTER_HELP if state.filter.focused else LIBRARY_HELP, style=styles.help)
    return text


def render_probe(state: ProbeState, styles: Styles = DEFAULT_STYLES) -> Text:
    """Render the HTTP probe."""
    text = Text(f"Checking {state.url}...")

    if state.error is not None:
        text.append(f"\n\nSomething went wrong: {state.error}", style=styles.error)
    elif state.status is not None:
        reason = _reason(state.status)
        text.append(f" {state.status} {reason}".rstrip() + "!")

    text.append("\n\n")
    text.append("Press q to quit.", style=styles.help)
    return text
