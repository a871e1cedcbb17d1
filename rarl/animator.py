"""Time-window animations driven by normalised video time."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable


class FinishAction(enum.Enum):
    """What an animation does once its window has passed."""

    START_OVER = enum.auto()
    """Start the animation again from progress 0."""
    REWIND = enum.auto()
    """Play backwards from 1 to 0, then start over."""
    STOP = enum.auto()
    """Stop drawing."""
    REPEAT_END = enum.auto()
    """Keep drawing with progress 1."""


@dataclass
class Animator:
    """Maps a global time ``t`` onto eased progress inside ``[start, end)``."""

    start: float
    end: float
    easing_fn: Callable[[float], float]
    finish_action: FinishAction
    interval_length: float = field(init=False)

    def __post_init__(self) -> None:
        self.interval_length = self.end - self.start

    def _progress(self, t: float) -> float | None:
        if t < self.end:
            return (t - self.start) / self.interval_length

        action = self.finish_action
        if action is FinishAction.START_OVER:
            self._restart(t)
            return 0.0
        if action is FinishAction.REWIND:
            overshoot = t - self.end
            if overshoot < self.interval_length:
                return 1.0 - overshoot / self.interval_length
            self._restart(t)
            return 0.0
        if action is FinishAction.REPEAT_END:
            return 1.0
        return None

    def _restart(self, t: float) -> None:
        self.start = t
        self.end = t + self.interval_length

    def draw(self, t: float, f: Callable[[float], object]) -> None:
        """Call ``f`` with the eased progress at time ``t``, if anything is to be drawn."""
        if t < self.start:
            return
        progress = self._progress(t)
        if progress is None:
            return
        f(self.easing_fn(progress))

    def is_finished(self, t: float) -> bool:
        """Whether the animation has ended for good at time ``t``."""
        return (
            self.finish_action in (FinishAction.REPEAT_END, FinishAction.STOP)
            and t >= self.end
        )