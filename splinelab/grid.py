"""One-dimensional grid generators."""

from __future__ import annotations

from .point import Point

__all__ = ["uniform_grid", "adaptive_grid"]

_RATIO_TOLERANCE = 1e-10


def uniform_grid(a: float, b: float, segments: int) -> list[Point]:
    """Return ``segments + 1`` equally spaced points from ``a`` to ``b``."""
    if segments <= 0:
        raise ValueError("number of segments must be positive")
    step = (b - a) / segments
    return [Point(a + i * step) for i in range(segments + 1)]


def adaptive_grid(a: float, b: float, segments: int, r: float) -> list[Point]:
    """Return a grid on ``[a, b]`` whose consecutive steps grow by the factor ``r``."""
    if abs(r - 1.0) < _RATIO_TOLERANCE:
        step = (b - a) / segments
        return [Point(a + i * step) for i in range(segments + 1)]

    first_step = (b - a) * (1 - r) / (1 - r**segments)
    points = [Point(a)]
    current = a
    for i in range(segments):
        current += first_step * r**i
        points.append(Point(current))
    return points