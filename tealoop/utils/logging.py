"""Event logging for a tealoop run."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from tealoop.constants import RUNS_DIR
from tealoop.messages import describe


class EventLogger:
    """Appends loop events to an NDJSON file for one run."""

    def __init__(self, base_dir: Path, run_id: Optional[str] = None):
        """Initialize event logger.

        Args:
            base_dir: Directory under which ``.tealoop/runs`` is created
            run_id: Optional run ID (generated if not provided)
        """
        self.base_dir = base_dir
        self.run_id = run_id or datetime.now().strftime("%Y%m%d_%H%M%S")

        self.log_dir = base_dir / RUNS_DIR / self.run_id
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.events_path = self.log_dir / "events.ndjson"

    def _write(self, event: str, **fields: Any) -> None:
        entry = {
            "ts": datetime.now().isoformat(),
            "event": event,
            **fields,
        }
        with open(self.events_path, "a") as f:
            f.write(json.dumps(entry, default=str) + "\n")

    def log_start(self, program: str) -> None:
        """Log program start.

        Args:
            program: Program name
        """
        self._write("start", program=program)

    def log_message(self, message: object) -> None:
        """Log a message as it is dispatched.

        Args:
            message: Dispatched message
        """
        self._write("message", **describe(message))

    def log_command(self, name: str) -> None:
        """Log a Command launch.

        Args:
            name: Command name
        """
        self._write("command", name=name)

    def log_stop(self, status: int) -> None:
        """Log loop exit.

        Args:
            status: Exit status returned by the loop
        """
        self._write("stop", status=status)

    def read_events(self) -> list[dict]:
        """Read back all events written so far.

        Returns:
            List of event dicts in write order
        """
        if not self.events_path.exists():
            return []
        with open(self.events_path) as f:
            return [json.loads(line) for line in f if line.strip()]

    def get_log_path(self) -> str:
        """Get the path to the log directory.

        Returns:
            Absolute path to log directory
        """
        return str(self.log_dir.absolute())
