"""Cooldown core — a tick-driven countdown state machine."""

from __future__ import annotations

import logging
import math
import numbers
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)

_TICK_QUANTUM = 1


class CooldownState(Enum):
    """Observable states of a cooldown."""

    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"


def _noop() -> None:
    """Default completion callback."""


class Cooldown:
    """A countdown measured in discrete simulation ticks.

    The owner advances the cooldown by calling :meth:`tick` once per
    simulation step and asks :meth:`is_ready` before permitting the timed
    action.  *on_complete* is called synchronously, exactly once per cycle,
    on the tick where the remaining time reaches zero.

    A non-positive (or non-finite) *duration* is accepted: such a cooldown is
    permanently ready, :meth:`start` never activates it and :meth:`progress` is ``1.0``.
    """

    def __init__(self, duration: float, on_complete: Callable[[], None] | None = None) -> None:
        if isinstance(duration, bool) or not isinstance(duration, numbers.Real):
            raise TypeError(f"duration must be a number, got {type(duration).__name__}")
        self._duration = duration
        self._on_complete: Callable[[], None] = on_complete if on_complete is not None else _noop
        self._remaining: float = 0
        self._active: bool = False
        self._paused: bool = False

    # -- attributes ----------------------------------------------------------

    @property
    def duration(self) -> float:
        """Total ticks spanned by one cycle; fixed at construction."""
        return self._duration

    @property
    def remaining(self) -> float:
        """Ticks left before the cooldown is ready again."""
        return self._remaining

    @property
    def active(self) -> bool:
        return self._active

    @property
    def paused(self) -> bool:
        return self._paused

    # -- operations ----------------------------------------------------------

    def start(self) -> None:
        """Begin a full countdown, restarting one already in progress."""
        self._paused = False
        if not self._counts_down():
            # Permanently ready: there is nothing to count.
            self._remaining = 0
            self._active = False
            return
        self._remaining = self._duration
        self._active = True
        logger.debug("Cooldown started: %s ticks", self._duration)

    def tick(self) -> None:
        """Advance one simulation step.  No-op unless running."""
        if not self._active or self._paused:
            return

        self._remaining -= _TICK_QUANTUM
        if self._remaining > 0:
            return

        self._remaining = 0
        self._active = False
        logger.debug("Cooldown complete after %s ticks", self._duration)
        self._on_complete()

    def pause(self) -> None:
        """Suspend the countdown without touching the remaining time."""
        self._paused = True

    def resume(self) -> None:
        """Let future ticks count down again.  Never reactivates a ready cooldown."""
        self._paused = False

    def reset(self) -> None:
        """Cancel silently and return to READY; *on_complete* is not called."""
        if self._active:
            logger.debug("Cooldown reset with %s ticks remaining", self._remaining)
        self._remaining = 0
        self._active = False
        self._paused = False

    # -- queries -------------------------------------------------------------

    def is_ready(self) -> bool:
        """Return ``True`` when no countdown is in progress."""
        return not self._active

    def progress(self) -> float:
        """Return the elapsed fraction of the cycle, clamped to ``[0.0, 1.0]``."""
        if not self._counts_down():
            return 1.0
        fraction = 1.0 - (self._remaining / self._duration)
        return min(max(fraction, 0.0), 1.0)

    def get_state(self) -> CooldownState:
        """Return the current cooldown state."""
        if not self._active:
            return CooldownState.READY
        if self._paused:
            return CooldownState.PAUSED
        return CooldownState.RUNNING

    def __repr__(self) -> str:
        return (
            f"Cooldown(duration={self._duration!r}, remaining={self._remaining!r}, "
            f"state={self.get_state().value})"
        )

    # -- private helpers -----------------------------------------------------

    def _counts_down(self) -> bool:
        """Return ``False`` for a non-positive or non-finite duration."""
        return math.isfinite(self._duration) and self._duration > 0
