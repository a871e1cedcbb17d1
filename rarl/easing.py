"""Easing functions mapping progress in [0, 1] to eased progress in [0, 1]."""

from __future__ import annotations

from typing import Callable

EasingFn = Callable[[float], float]


def linear(t: float) -> float:
    """Return ``t`` unchanged."""
    return t


def cubic_in(t: float) -> float:
    """Start slowly and accelerate."""
    return t * t * t


def cubic_out(t: float) -> float:
    """Start quickly and decelerate."""
    p = t - 1.0
    return p * p * p + 1.0


def cubic_inout(t: float) -> float:
    """Accelerate through the first half and decelerate through the second."""
    if t < 0.5:
        return 4.0 * t * t * t
    p = 2.0 * t - 2.0
    return 0.5 * p * p * p + 1.0