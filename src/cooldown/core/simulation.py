"""Simulation driver — advances a cooldown through a scripted tick loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from cooldown.core.cooldown import Cooldown, CooldownState

logger = logging.getLogger(__name__)

ACTIONS = ("start", "pause", "resume", "reset")

_DEFAULT_SCHEDULE: dict[int, list[str]] = {1: ["start"]}


class InvalidScheduleError(Exception):
    """Raised when a schedule entry cannot be parsed."""


@dataclass(frozen=True)
class Frame:
    """Snapshot of the cooldown taken at the end of one step."""

    step: int
    state: CooldownState
    remaining: float
    progress: float
    completed: bool


def _format_progress(fraction: float) -> str:
    """Format *fraction* as a whole percentage, e.g. ``75%``."""
    return f"{round(fraction * 100):d}%"


def format_frame(frame: Frame) -> str:
    """Render *frame* as a single status line."""
    line = (
        f"step {frame.step:>3}  {frame.state.value:<7}  "
        f"remaining {frame.remaining:g}  progress {_format_progress(frame.progress):>4}"
    )
    if frame.completed:
        line += "  complete"
    return line


def parse_schedule(entries: Iterable[str]) -> dict[int, list[str]]:
    """Parse ``STEP:ACTION`` entries into a step -> actions mapping.

    Actions scheduled for the same step keep their command-line order.
    """
    schedule: dict[int, list[str]] = {}
    for entry in entries:
        step_text, sep, action = entry.partition(":")
        if not sep:
            raise InvalidScheduleError(f"expected STEP:ACTION, got {entry!r}")
        try:
            step = int(step_text)
        except ValueError:
            raise InvalidScheduleError(f"step must be an integer, got {step_text!r}") from None
        if step < 1:
            raise InvalidScheduleError(f"step must be 1 or greater, got {step}")
        action = action.strip().lower()
        if action not in ACTIONS:
            raise InvalidScheduleError(
                f"unknown action {action!r}; expected one of {', '.join(ACTIONS)}"
            )
        schedule.setdefault(step, []).append(action)
    return schedule


class Simulation:
    """Owns one cooldown and drives it the way a game loop would.

    Each :meth:`step` first applies the actions scheduled for that step and
    then advances the cooldown by exactly one tick.  Steps are numbered
    from 1.  Without a schedule the cooldown is started on step 1.
    """

    def __init__(self, duration: float, schedule: dict[int, list[str]] | None = None) -> None:
        self._schedule = dict(schedule) if schedule is not None else dict(_DEFAULT_SCHEDULE)
        self._cooldown = Cooldown(duration, on_complete=self._record_completion)
        self._step = 0
        self._completions: list[int] = []

    @property
    def cooldown(self) -> Cooldown:
        return self._cooldown

    @property
    def completions(self) -> list[int]:
        """Steps on which the cooldown completed, in order."""
        return list(self._completions)

    def step(self) -> Frame:
        """Run one simulation step and return the resulting frame."""
        self._step += 1
        for action in self._schedule.get(self._step, []):
            logger.debug("step %d: %s", self._step, action)
            getattr(self._cooldown, action)()

        completed_before = len(self._completions)
        self._cooldown.tick()
        return Frame(
            step=self._step,
            state=self._cooldown.get_state(),
            remaining=self._cooldown.remaining,
            progress=self._cooldown.progress(),
            completed=len(self._completions) > completed_before,
        )

    def run(self, steps: int) -> list[Frame]:
        """Run *steps* consecutive steps and return their frames."""
        return [self.step() for _ in range(steps)]

    # -- private helpers -----------------------------------------------------

    def _record_completion(self) -> None:
        self._completions.append(self._step)
