"""Terminal I/O: keystroke capture and frame output."""

import codecs
import os
import select
import sys
import termios
import threading
import tty
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.live import Live
from rich.text import Text

from tealoop.constants import CONTROL_KEYS, ESCAPE_SEQUENCES, ESCAPE_TIMEOUT
from tealoop.messages import KeyInput, Quit


class TerminalSetupError(Exception):
    """The terminal could not be placed in interactive mode."""


def decode_keys(data: str) -> list[str]:
    """Split raw terminal input into key names.

    Args:
        data: Characters read from the terminal in one go

    Returns:
        Key names in input order. Unknown escape sequences are dropped.
    """
    keys = []
    i = 0
    while i < len(data):
        ch = data[i]

        if ch == "\x1b":
            for sequence, name in ESCAPE_SEQUENCES.items():
                if data.startswith(sequence, i):
                    keys.append(name)
                    i += len(sequence)
                    break
            else:
                if data[i + 1:i + 2] in ("[", "O"):
                    # Unknown CSI/SS3 sequence: skip through its final byte
                    j = i + 2
                    while j < len(data) and not (data[j].isalpha() or data[j] == "~"):
                        j += 1
                    i = j + 1
                else:
                    keys.append("esc")
                    i += 1
            continue

        if ch in CONTROL_KEYS:
            keys.append(CONTROL_KEYS[ch])
        elif ord(ch) < 32:
            keys.append(f"ctrl+{chr(ord(ch) + 96)}")
        else:
            keys.append(ch)
        i += 1

    return keys


def split_pending_escape(data: str) -> tuple[str, str]:
    """Split off a trailing escape sequence that may still be arriving.

    Args:
        data: Decoded terminal input

    Returns:
        Tuple of (complete input, unfinished tail). The tail is a lone
        escape byte or a CSI/SS3 prefix without its final byte; it is
        empty when ``data`` ends on a complete key.
    """
    start = data.rfind("\x1b")
    if start == -1:
        return data, ""

    tail = data[start:]
    if tail == "\x1b":
        return data[:start], tail
    if tail[1] == "O" and len(tail) == 2:
        return data[:start], tail
    if tail[1] == "[" and not any(c.isalpha() or c == "~" for c in tail[2:]):
        return data[:start], tail
    return data, ""


class Terminal:
    """Context manager holding stdin in cbreak mode.

    Signal keys are disabled too, so ctrl+c reaches the program as a key
    instead of raising KeyboardInterrupt.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        poll_interval: float = 0.1,
        escape_timeout: float = ESCAPE_TIMEOUT,
    ):
        """Initialize terminal.

        Args:
            stdin: Input stream (defaults to sys.stdin)
            poll_interval: How often the reader checks for shutdown, in seconds
            escape_timeout: How long an unfinished escape sequence waits for
                the rest of its bytes before it is decoded as is, in seconds
        """
        self.stdin = stdin or sys.stdin
        self.poll_interval = poll_interval
        self.escape_timeout = escape_timeout
        self._fd: Optional[int] = None
        self._saved: Optional[list] = None

    def __enter__(self) -> "Terminal":
        fd = None
        saved = None
        try:
            if not self.stdin.isatty():
                raise TerminalSetupError("standard input is not a terminal")
            fd = self.stdin.fileno()
            saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        except (OSError, ValueError, termios.error) as e:
            if saved is not None:
                # cbreak may already be active; put the terminal back
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            raise TerminalSetupError(f"cannot enter interactive mode: {e}") from e

        self._fd = fd
        self._saved = saved
        return self

    def __exit__(self, *exc_info) -> None:
        if self._fd is not None and self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None

    def read_keys(self, send: Callable[[object], None], done: threading.Event) -> None:
        """Forward keystrokes to ``send`` until ``done`` is set.

        Runs on the input thread. End of input is reported as Quit.
        Escape sequences and multibyte characters split across reads are
        reassembled before decoding.

        Args:
            send: Enqueue function of the loop
            done: Set by the loop when it exits
        """
        if self._fd is None:
            raise TerminalSetupError("terminal is not in interactive mode")

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        pending = ""

        def emit(text: str) -> None:
            for key in decode_keys(text):
                send(KeyInput(key))

        while not done.is_set():
            timeout = self.escape_timeout if pending else self.poll_interval
            try:
                ready, _, _ = select.select([self._fd], [], [], timeout)
                if not ready:
                    if pending:
                        # Nothing followed: a lone escape is the esc key
                        emit(pending)
                        pending = ""
                    continue
                data = os.read(self._fd, 1024)
            except OSError:
                # Terminal went away; nothing more can be read
                send(Quit())
                return
            if not data:
                emit(pending + decoder.decode(b"", final=True))
                send(Quit())
                return

            complete, pending = split_pending_escape(pending + decoder.decode(data))
            emit(complete)


class LiveDisplay:
    """Draws frames through a rich Live region."""

    def __init__(self, console: Optional[Console] = None, alt_screen: bool = False):
        """Initialize display.

        Args:
            console: Console to draw on
            alt_screen: Use the terminal's alternate screen buffer
        """
        self.console = console or Console()
        self.alt_screen = alt_screen
        self._live: Optional[Live] = None

    def __enter__(self) -> "LiveDisplay":
        self._live = Live(
            Text(),
            console=self.console,
            auto_refresh=False,
            screen=self.alt_screen,
        )
        self._live.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def show(self, frame: Text) -> None:
        """Replace the displayed frame.

        Args:
            frame: Rendered frame
        """
        if self._live is None:
            raise RuntimeError("display is not started")
        self._live.update(frame, refresh=True)
