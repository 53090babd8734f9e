"""Constants and default values for tealoop."""

# Probe defaults
DEFAULT_PROBE_URL = "https://charm.sh/"
DEFAULT_PROBE_TIMEOUT = 10  # seconds

# Listing defaults
DEFAULT_SCAN_SUFFIX = ".pdf"

# Text widget cursor blink
DEFAULT_BLINK_INTERVAL = 0.53  # seconds

# Where event logs are written, relative to the working directory
RUNS_DIR = ".tealoop/runs"

# Key names produced by the terminal decoder
CANCEL_KEYS = frozenset({"esc", "ctrl+c"})
QUIT_KEY = "q"
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
FILTER_KEY = "/"

# Escape sequences mapped to key names
ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[3~": "delete",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
}

# How long a partial escape sequence waits for its remaining bytes
ESCAPE_TIMEOUT = 0.05  # seconds

# Single control bytes mapped to key names
CONTROL_KEYS = {
    "\x03": "ctrl+c",
    "\x1b": "esc",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}

# Built-in ignore patterns for the optional ignore-aware listing
BUILTIN_IGNORES = [
    # Version control
    ".git/",

    # tealoop internal
    ".tealoop/",

    # Python
    "__pycache__/",
    ".pytest_cache/",
    ".mypy_cache/",
    ".tox/",

    # Virtual environments
    "venv/",
    ".venv/",

    # JavaScript/Node
    "node_modules/",
]
