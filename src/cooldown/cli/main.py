"""CLI entry point for cooldown.

Uses Click to expose the ``cooldown`` command group.  ``cooldown run``
drives a single cooldown through a scripted tick loop and prints one
status line per step.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Callable, TypeVar

import click

import cooldown
from cooldown.core.simulation import (
    ACTIONS,
    InvalidScheduleError,
    Simulation,
    format_frame,
    parse_schedule,
)

T = TypeVar("T")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _run(action: Callable[[], T]) -> T:
    """Execute *action*, converting ``InvalidScheduleError`` to a CLI error.

    On ``InvalidScheduleError`` the message is printed to stderr and the
    process exits with code 1.
    """
    try:
        return action()
    except InvalidScheduleError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=cooldown.__version__, prog_name="cooldown")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="COOLDOWN_LOG_LEVEL",
    help="Logging verbosity (also read from COOLDOWN_LOG_LEVEL).",
)
def cli(log_level: str) -> None:
    """cooldown: a tick-driven countdown timer for game loops."""
    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT, stream=sys.stderr)


@cli.command()
@click.argument("duration", type=float)
@click.option(
    "--steps",
    type=click.IntRange(min=0),
    default=None,
    help="Number of steps to simulate.  Defaults to the duration plus one.",
)
@click.option(
    "--at",
    "entries",
    multiple=True,
    metavar="STEP:ACTION",
    help=f"Schedule an action ({', '.join(ACTIONS)}) before a step.  Repeatable.",
)
def run(duration: float, steps: int | None, entries: tuple[str, ...]) -> None:
    """Simulate a cooldown of DURATION ticks, one status line per step."""
    schedule = _run(lambda: parse_schedule(entries)) if entries else None
    if steps is None:
        steps = math.ceil(duration) + 1 if math.isfinite(duration) and duration > 0 else 1

    simulation = Simulation(duration, schedule)
    for frame in simulation.run(steps):
        click.echo(format_frame(frame))

    completions = simulation.completions
    click.echo(f"Completed {len(completions)} time(s)")
