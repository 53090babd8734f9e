"""The message loop driving a tealoop program.

One dispatch thread owns the State. Keystrokes and Command outcomes are
put on a single FIFO queue; the loop takes one message at a time, hands it
to the reducer, launches any returned Command on its own thread, and
redraws. Commands never see the State, they only produce messages.
"""

import queue
import threading
from typing import Any, Callable, Optional, Protocol

from rich.text import Text

from tealoop.commands import Command
from tealoop.messages import CommandCompleted, Failure
from tealoop.reducer import Transition
from tealoop.utils.logging import EventLogger


class Display(Protocol):
    """Anything that can show a rendered frame."""

    def show(self, frame: Text) -> None:
        ...


InputSource = Callable[[Callable[[object], None], threading.Event], None]


class Program:
    """A running program: init, update and view wired to the loop."""

    def __init__(
        self,
        name: str,
        init: Callable[[], tuple[Any, Optional[Command]]],
        update: Callable[[Any, object], Transition],
        view: Callable[[Any], Text],
        display: Display,
        input_source: Optional[InputSource] = None,
        logger: Optional[EventLogger] = None,
    ):
        """Initialize program.

        Args:
            name: Program name (for logs)
            init: Returns the initial State and an optional first Command
            update: Reducer
            view: Renderer
            display: Where frames are drawn
            input_source: Called on its own thread with (send, done); pushes
                input messages until ``done`` is set
            logger: Optional event logger
        """
        self.name = name
        self.init = init
        self.update = update
        self.view = view
        self.display = display
        self.input_source = input_source
        self.logger = logger

        self.state: Any = None
        self._queue: queue.Queue = queue.Queue()
        self._done = threading.Event()

    @property
    def finished(self) -> bool:
        """Whether the loop has exited."""
        return self._done.is_set()

    def send(self, message: object) -> None:
        """Enqueue a message; safe from any thread.

        Messages sent after the loop exited are dropped.

        Args:
            message: Message to deliver
        """
        if self._done.is_set():
            return
        self._queue.put(message)

    def run(self) -> int:
        """Run until the reducer signals stop.

        Returns:
            Exit status (0 on normal quit)
        """
        state, command = self.init()
        self.state = state

        if self.logger:
            self.logger.log_start(self.name)

        if self.input_source is not None:
            threading.Thread(
                target=self.input_source,
                args=(self.send, self._done),
                name=f"{self.name}-input",
                daemon=True,
            ).start()

        self.display.show(self.view(state))
        if command is not None:
            self._launch(command)

        try:
            while True:
                message = self._queue.get()
                if self.logger:
                    self.logger.log_message(message)

                transition = self.update(state, message)
                state = transition.state
                self.state = state

                if transition.stop:
                    self.display.show(self.view(state))
                    break

                if transition.command is not None:
                    self._launch(transition.command)
                self.display.show(self.view(state))
        finally:
            self._done.set()

        if self.logger:
            self.logger.log_stop(0)
        return 0

    def _launch(self, command: Command) -> None:
        """Start a Command on a daemon thread.

        Daemon threads let the process exit while a Command (a slow probe,
        for instance) is still blocked; its late message is dropped.
        """
        if self.logger:
            self.logger.log_command(command.name)

        threading.Thread(
            target=self._execute,
            args=(command,),
            name=f"{self.name}-{command.name}",
            daemon=True,
        ).start()

    def _execute(self, command: Command) -> None:
        try:
            payload = command.run()
        except Exception as e:
            # Errors are data: the reducer sees them as a Failure
            payload = Failure(cause=f"{command.name} failed: {e}")

        if payload is not None:
            self.send(CommandCompleted(payload))
