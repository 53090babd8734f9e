"""Commands: blocking work run off the dispatch thread.

A Command is a name plus a function and its arguments. The loop runs the
function on its own thread and wraps whatever payload it returns in a
``CommandCompleted`` message. Returning ``None`` means "no outcome".
"""

import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional

import requests

from tealoop.constants import DEFAULT_BLINK_INTERVAL, DEFAULT_PROBE_TIMEOUT, DEFAULT_SCAN_SUFFIX
from tealoop.messages import BlinkTick, FileListResult, Failure, Payload, StatusResult
from tealoop.utils.ignore import IgnoreRules


@dataclass(frozen=True)
class Command:
    """Description of work plus the function that performs it."""

    name: str
    func: Callable[..., Optional[Payload]]
    args: tuple = ()

    def run(self) -> Optional[Payload]:
        """Perform the work; blocks the calling thread."""
        return self.func(*self.args)


def check_status(url: str, timeout: float = DEFAULT_PROBE_TIMEOUT) -> Payload:
    """Issue one GET request and report only its status code.

    Args:
        url: URL to probe
        timeout: Client-side timeout in seconds

    Returns:
        StatusResult on any HTTP response, Failure on transport errors
    """
    try:
        # stream=True so the body is never downloaded, only closed
        with requests.get(url, timeout=timeout, stream=True) as response:
            return StatusResult(code=response.status_code)
    except requests.RequestException as e:
        return Failure(cause=str(e))


def probe_command(url: str, timeout: float = DEFAULT_PROBE_TIMEOUT) -> Command:
    """Build the network probe Command."""
    return Command(name="probe", func=check_status, args=(url, timeout))


def _walk(
    directory: Path,
    prune: Optional[Callable[[Path, bool], bool]] = None,
) -> Iterator[os.DirEntry]:
    """Yield entries depth-first in lexical order; errors propagate.

    Entries for which ``prune(path, is_dir)`` is true are neither yielded
    nor descended into.
    """
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        is_dir = entry.is_dir(follow_symlinks=False)
        if prune and prune(Path(entry.path), is_dir):
            continue
        yield entry
        if is_dir:
            yield from _walk(Path(entry.path), prune)


def list_files(
    root: Path,
    suffix: str = DEFAULT_SCAN_SUFFIX,
    ignore_rules: Optional[IgnoreRules] = None,
) -> Payload:
    """Collect base names of files under ``root`` ending in ``suffix``.

    Matching is case-insensitive. The walk stops at the first error.

    Args:
        root: Directory to walk
        suffix: File name suffix to match
        ignore_rules: Optional rules; matching entries (and, for
            directories, their contents) are skipped

    Returns:
        FileListResult with names in walk order, or Failure
    """
    suffix = suffix.lower()
    prune = ignore_rules.should_ignore if ignore_rules else None
    names = []

    try:
        for entry in _walk(root, prune):
            if not entry.is_dir(follow_symlinks=False) and entry.name.lower().endswith(suffix):
                names.append(entry.name)
    except OSError as e:
        return Failure(cause=f"error walking directory '{root}': {e}")

    return FileListResult(names=tuple(names))


def listing_command(
    root: Path,
    suffix: str = DEFAULT_SCAN_SUFFIX,
    ignore_rules: Optional[IgnoreRules] = None,
) -> Command:
    """Build the directory listing Command."""
    return Command(name="listing", func=list_files, args=(root, suffix, ignore_rules))


def _blink(tag: int, interval: float) -> Payload:
    time.sleep(interval)
    return BlinkTick(tag=tag)


def blink_command(tag: int, interval: float = DEFAULT_BLINK_INTERVAL) -> Command:
    """Build the cursor blink timer Command for widget generation ``tag``."""
    return Command(name="blink", func=_blink, args=(tag, interval))
