"""The two tealoop programs: HTTP probe and file library browser."""

from functools import partial
from pathlib import Path
from typing import Optional

from tealoop.commands import listing_command, probe_command
from tealoop.config import Config
from tealoop.loop import Display, InputSource, Program
from tealoop.reducer import LIBRARY_POLICY, PROBE_POLICY, reduce_library, reduce_probe
from tealoop.render import render_library, render_probe
from tealoop.state import LibraryState, ProbeState
from tealoop.utils.ignore import IgnoreRules
from tealoop.utils.logging import EventLogger


def probe_program(
    config: Config,
    display: Display,
    input_source: Optional[InputSource] = None,
    logger: Optional[EventLogger] = None,
) -> Program:
    """Build the HTTP probe program.

    The probe starts immediately; the program ends once it reports back.

    Args:
        config: Configuration (URL and timeout)
        display: Where frames are drawn
        input_source: Keyboard input source
        logger: Optional event logger

    Returns:
        Program ready to run
    """

    def init():
        return ProbeState(url=config.probe_url), probe_command(config.probe_url, config.probe_timeout)

    return Program(
        name="probe",
        init=init,
        update=partial(reduce_probe, policy=PROBE_POLICY),
        view=render_probe,
        display=display,
        input_source=input_source,
        logger=logger,
    )


def library_program(
    config: Config,
    root: Path,
    display: Display,
    input_source: Optional[InputSource] = None,
    logger: Optional[EventLogger] = None,
) -> Program:
    """Build the file library browser program.

    Args:
        config: Configuration (suffix, ignore handling, blink interval)
        root: Directory to scan
        display: Where frames are drawn
        input_source: Keyboard input source
        logger: Optional event logger

    Returns:
        Program ready to run
    """
    ignore_rules = IgnoreRules(root) if config.respect_ignore else None

    def init():
        state = LibraryState(suffix=config.scan_suffix)
        return state, listing_command(root, config.scan_suffix, ignore_rules)

    return Program(
        name="library",
        init=init,
        update=partial(reduce_library, policy=LIBRARY_POLICY, blink_interval=config.blink_interval),
        view=render_library,
        display=display,
        input_source=input_source,
        logger=logger,
    )
