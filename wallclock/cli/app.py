"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig
from ..domain.calendar_date import CalendarDate
from ..domain.exceptions import InvalidArgumentError, WallclockError
from ..domain.time_of_day import TimeOfDay

app = typer.Typer(
    name="wallclock",
    help="Inspect, compare and resolve wall-clock times of day",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./wallclock.yaml")
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _load_config(config_file: Optional[Path], verbose: bool) -> AppConfig:
    """Load configuration and set up logging, exiting on failure."""
    try:
        config = AppConfig.load_or_default(config_file)
    except (FileNotFoundError, WallclockError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    return config


def _format_time(time_of_day: TimeOfDay, zero_pad: bool) -> str:
    if zero_pad:
        return f"{time_of_day.hour.value:02d}:{time_of_day.minute.value:02d}"
    return str(time_of_day)


def _parse_hh_mm(token: str) -> TimeOfDay:
    """
    Parse a strict H:M token such as 9:30 or 09:05.
    
    Raises:
        InvalidArgumentError: If the token is not two colon-separated numbers
    """
    parts = token.strip().split(":")
    if len(parts) != 2 or not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidArgumentError(f"Expected a time as H:M, got {token!r}")
    return TimeOfDay.from_ints(int(parts[0]), int(parts[1]))


@app.command()
def show(
    hour: Annotated[int, typer.Argument(help="Hour of the day (0-23)")],
    minute: Annotated[int, typer.Argument(help="Minute of the hour (0-59)")],
    pad: Annotated[bool, typer.Option("--pad", help="Zero-pad hour and minute.")] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Show a time of day.
    
    Examples:
    
        wallclock show 9 30
        wallclock show 9 5 --pad
    """
    config = _load_config(config_file, verbose)

    try:
        time_of_day = TimeOfDay.from_ints(hour, minute)
    except InvalidArgumentError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    logger.debug("Built %r", time_of_day)
    console.print(_format_time(time_of_day, pad or config.display.zero_pad))


@app.command()
def compare(
    first_hour: Annotated[int, typer.Argument(help="Hour of the first time")],
    first_minute: Annotated[int, typer.Argument(help="Minute of the first time")],
    second_hour: Annotated[int, typer.Argument(help="Hour of the second time")],
    second_minute: Annotated[int, typer.Argument(help="Minute of the second time")],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Compare two times of day. There is no wraparound at midnight.
    """
    config = _load_config(config_file, verbose)

    try:
        first = TimeOfDay.from_ints(first_hour, first_minute)
        second = TimeOfDay.from_ints(second_hour, second_minute)
    except InvalidArgumentError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if first.is_before(second):
        relation = "before"
    elif first.is_after(second):
        relation = "after"
    else:
        relation = "equal to"

    zero_pad = config.display.zero_pad
    console.print(f"{_format_time(first, zero_pad)} is {relation} {_format_time(second, zero_pad)}")


@app.command()
def resolve(
    hour: Annotated[int, typer.Argument(help="Hour of the day (0-23)")],
    minute: Annotated[int, typer.Argument(help="Minute of the hour (0-59)")],
    date: Annotated[str, typer.Option("--date", "-d", help="Date (YYYY-MM-DD)")],
    tz: Annotated[Optional[str], typer.Option("--tz", help="IANA time zone. Defaults to the configured zone.")] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Resolve a time of day on a date to an absolute instant.
    
    Examples:
    
        wallclock resolve 9 30 --date 2024-11-25
        wallclock resolve 9 30 --date 2024-11-25 --tz America/New_York
    """
    config = _load_config(config_file, verbose)
    zone = tz or config.timezone

    try:
        time_of_day = TimeOfDay.from_ints(hour, minute)
        calendar_date = CalendarDate.from_iso(date)
        time_point = time_of_day.as_time_point_given(calendar_date, zone)
    except InvalidArgumentError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    logger.debug("Resolved %s on %s in %s to %d ms", time_of_day, calendar_date, zone, time_point.millis_since_epoch)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Zone", style="bold yellow")
    table.add_column("Instant")
    table.add_row(zone, time_point.as_datetime(zone).to_iso8601_string())
    table.add_row("UTC", str(time_point))
    console.print(table)


@app.command()
def sort(
    times: Annotated[List[str], typer.Argument(help="Times of day as H:M, e.g. 9:30 17:05")],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
):
    """
    Sort times of day from earliest to latest.
    """
    config = _load_config(config_file, verbose)

    try:
        parsed = [_parse_hh_mm(token) for token in times]
    except InvalidArgumentError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print(" ".join(_format_time(t, config.display.zero_pad) for t in sorted(parsed)))


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]wallclock[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
