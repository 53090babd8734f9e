"""Tests for the renderers."""

from dataclasses import replace

from tealoop.render import render_library, render_probe, render_text_input
from tealoop.state import LibraryState, ProbeState, TextInput


def test_library_loading():
    """Loading state shows the scanning message."""
    assert render_library(LibraryState()).plain == "Scanning for PDF files..."


def test_library_error():
    """Error state shows the error and the quit hint."""
    text = render_library(LibraryState(loading=False, error="permission denied")).plain

    assert "Error: permission denied" in text
    assert "Press q to quit." in text


def test_library_empty():
    """An empty list renders a placeholder."""
    text = render_library(LibraryState(loading=False)).plain

    assert "No PDF files found in the current directory." in text


def test_library_list_marks_cursor():
    """The cursor row carries the marker."""
    state = LibraryState(files=("a.pdf", "b.pdf"), cursor=1, loading=False)

    lines = render_library(state).plain.splitlines()

    assert "   a.pdf " in lines
    assert " > b.pdf " in lines


def test_library_filter_without_matches():
    """A filter hiding everything renders its own placeholder."""
    state = LibraryState(
        files=("a.pdf",),
        loading=False,
        filter=TextInput(value="zzz", position=3),
    )

    assert "No PDF files match the filter." in render_library(state).plain


def test_library_selected():
    """A selection is shown below the list."""
    state = LibraryState(files=("a.pdf",), loading=False, selected="a.pdf")

    assert "Selected: a.pdf" in render_library(state).plain


def test_library_help_switches_with_focus():
    """Help text follows the filter focus."""
    state = LibraryState(files=("a.pdf",), loading=False)
    focused = replace(state, filter=TextInput(focused=True))

    assert "k/j" in render_library(state).plain
    assert "enter to finish" in render_library(focused).plain


def test_text_input_placeholder_and_cursor():
    """Empty unfocused fields show the placeholder; focused show a cursor."""
    assert render_text_input(TextInput(placeholder="type")).plain == "type"
    assert render_text_input(TextInput(value="ab", position=2, focused=True)).plain == "ab "
    assert render_text_input(TextInput(value="ab", position=1, focused=True)).plain == "ab"


def test_probe_states():
    """Probe renders waiting, success and failure."""
    state = ProbeState(url="http://example.test/")

    assert render_probe(state).plain.startswith("Checking http://example.test/...")
    assert "200 OK!" in render_probe(replace(state, status=200, loading=False)).plain
    assert "599!" in render_probe(replace(state, status=599, loading=False)).plain

    failed = render_probe(replace(state, error="connection refused", loading=False)).plain
    assert "Something went wrong: connection refused" in failed
    assert "Press q to quit." in failed


def test_library_labels_follow_suffix():
    """Labels name the configured file kind, not always PDF."""
    loading = LibraryState(suffix=".txt")
    empty = replace(loading, loading=False)
    listed = replace(empty, files=("notes.txt",), filter=TextInput(value="zzz", position=3))

    assert render_library(loading).plain == "Scanning for TXT files..."
    assert "No TXT files found in the current directory." in render_library(empty).plain
    assert "Found TXT files:" in render_library(listed).plain
    assert "No TXT files match the filter." in render_library(listed).plain
