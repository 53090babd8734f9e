"""CLI for tealoop."""

import sys
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from tealoop.config import Config
from tealoop.loop import Program
from tealoop.programs import library_program, probe_program
from tealoop.terminal import LiveDisplay, Terminal, TerminalSetupError
from tealoop.utils.logging import EventLogger

app = typer.Typer(help="tealoop - message-loop terminal tools")
console = Console()


def load_config(**overrides) -> Config:
    """Load and validate configuration, exiting on errors.

    Args:
        **overrides: Config fields set from CLI options; None and False
            values leave the loaded setting alone

    Returns:
        Valid Config
    """
    try:
        config = Config.load()
    except ValueError as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        sys.exit(1)

    for name, value in overrides.items():
        if value is not None and value is not False:
            setattr(config, name, value)

    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        sys.exit(1)

    return config


def run_interactive(build: Callable[..., Program], config: Config) -> Program:
    """Run a program on the terminal.

    Args:
        build: Program factory taking display, input_source and logger
        config: Configuration

    Returns:
        The finished program (its ``state`` is the final State)
    """
    try:
        with Terminal() as terminal:
            logger = EventLogger(Path.cwd()) if config.log_events else None
            with LiveDisplay(console, alt_screen=config.alt_screen) as display:
                program = build(display=display, input_source=terminal.read_keys, logger=logger)
                status = program.run()
    except TerminalSetupError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if logger:
        console.print(f"[dim]Event log: {logger.get_log_path()}[/dim]")
    if status != 0:
        sys.exit(status)
    return program


alt_screen_option = typer.Option(False, "--alt-screen", help="Draw in the alternate screen buffer")
log_events_option = typer.Option(False, "--log-events", help="Write loop events to .tealoop/runs/")


@app.command()
def probe(
    url: Optional[str] = typer.Argument(
        None,
        help="URL to check (default: TEALOOP_PROBE_URL)"
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout", "-t",
        help="Request timeout in seconds"
    ),
    alt_screen: bool = alt_screen_option,
    log_events: bool = log_events_option,
) -> None:
    """Check the HTTP status of a URL."""
    config = load_config(
        probe_url=url,
        probe_timeout=timeout,
        alt_screen=alt_screen,
        log_events=log_events,
    )

    run_interactive(lambda **kwargs: probe_program(config, **kwargs), config)


@app.command()
def library(
    path: Optional[str] = typer.Argument(
        None,
        help="Directory to scan (default: current directory)"
    ),
    respect_ignore: bool = typer.Option(
        False,
        "--respect-ignore",
        help="Skip paths matched by .gitignore and built-in ignores"
    ),
    alt_screen: bool = alt_screen_option,
    log_events: bool = log_events_option,
) -> None:
    """Browse PDF files under a directory."""
    config = load_config(
        respect_ignore=respect_ignore,
        alt_screen=alt_screen,
        log_events=log_events,
    )

    root = Path(path) if path else Path(".")
    if not root.is_dir():
        console.print(f"[red]Error: Path is not a directory: {root}[/red]")
        sys.exit(1)

    program = run_interactive(lambda **kwargs: library_program(config, root, **kwargs), config)

    selected = program.state.selected
    if selected:
        console.print(f"[cyan]Selected:[/cyan] {selected}")


@app.command(name="config")
def show_config() -> None:
    """Show the effective configuration."""
    config = load_config()
    console.print(Panel(
        "\n".join(f"{k}: {v}" for k, v in config.to_dict().items()),
        title="Configuration",
        border_style="blue"
    ))


if __name__ == "__main__":
    app()
