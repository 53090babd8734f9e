"""Pytest configuration and fixtures."""

import tempfile
import threading
from pathlib import Path

import pytest

from tealoop.config import Config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def pdf_tree(temp_dir):
    """Create a directory tree with a few PDFs and other files."""
    (temp_dir / "papers").mkdir()
    (temp_dir / "papers" / "b_paper.pdf").write_text("%PDF-1.4")
    (temp_dir / "papers" / "notes.txt").write_text("notes")

    (temp_dir / "archive").mkdir()
    (temp_dir / "archive" / "OLD.PDF").write_text("%PDF-1.4")

    (temp_dir / "a_intro.pdf").write_text("%PDF-1.4")
    (temp_dir / "README.md").write_text("# Library\n")

    yield temp_dir


@pytest.fixture
def config():
    """Create a test configuration."""
    return Config(
        probe_url="http://example.test/",
        probe_timeout=1,
        blink_interval=0.01,
    )


class FakeDisplay:
    """Collects rendered frames as plain strings."""

    def __init__(self):
        self.frames = []

    def show(self, frame):
        self.frames.append(frame.plain)


@pytest.fixture
def display():
    """Create a display that records frames."""
    return FakeDisplay()


@pytest.fixture
def scripted():
    """Build an input source that sends the given messages once."""

    def build(*messages):
        def source(send, done: threading.Event):
            for message in messages:
                send(message)

        return source

    return build
