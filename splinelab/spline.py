"""Interpolating splines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import pairwise
from typing import Sequence

from .point import Point

__all__ = ["SplineValue", "Spline", "CubicSpline"]


@dataclass(frozen=True)
class SplineValue:
    """A spline's value and its first two derivatives at one point."""

    value: float
    first: float
    second: float


class Spline(ABC):
    """Interface of an interpolating spline."""

    @abstractmethod
    def update(self, nodes: Sequence[Point], values: Sequence[float]) -> None:
        """Build the spline through ``nodes`` with the function ``values``."""

    @abstractmethod
    def evaluate(self, point: Point) -> SplineValue:
        """Return the spline value and derivatives at ``point``."""


@dataclass(frozen=True)
class _Segment:
    x0: float
    x1: float
    a: float
    b: float
    c: float
    d: float


class CubicSpline(Spline):
    """Natural cubic spline (zero second derivative at both ends)."""

    _EPS = 1e-10

    def __init__(self) -> None:
        self._segments: list[_Segment] = []

    def update(self, nodes: Sequence[Point], values: Sequence[float]) -> None:
        if len(nodes) < 2:
            raise ValueError("a spline needs at least 2 points")
        if len(nodes) != len(values):
            raise ValueError("number of points and values must match")

        xs = [node.x for node in nodes]
        fs = list(values)
        n = len(xs) - 1

        h = [x1 - x0 for x0, x1 in pairwise(xs)]
        slopes = [(f1 - f0) / step for (f0, f1), step in zip(pairwise(fs), h)]

        mu = [0.0]
        z = [0.0]
        for i in range(1, n):
            alpha = 3.0 * (slopes[i] - slopes[i - 1])
            diag = 2.0 * (xs[i + 1] - xs[i - 1]) - h[i - 1] * mu[-1]
            z.append((alpha - h[i - 1] * z[-1]) / diag)
            mu.append(h[i] / diag)

        c = [0.0] * (n + 1)
        for i in reversed(range(n)):
            c[i] = z[i] - mu[i] * c[i + 1]

        self._segments = [
            _Segment(
                x0=x0,
                x1=x1,
                a=f0,
                b=slope - step * (c1 + 2.0 * c0) / 3.0,
                c=c0,
                d=(c1 - c0) / (3.0 * step),
            )
            for (x0, x1), f0, slope, step, (c0, c1) in zip(
                pairwise(xs), fs, slopes, h, pairwise(c)
            )
        ]

    def evaluate(self, point: Point) -> SplineValue:
        x = point.x
        for seg in self._segments:
            if seg.x0 - self._EPS <= x <= seg.x1 + self._EPS:
                dx = x - seg.x0
                return SplineValue(
                    value=seg.a + seg.b * dx + seg.c * dx**2 + seg.d * dx**3,
                    first=seg.b + 2.0 * seg.c * dx + 3.0 * seg.d * dx**2,
                    second=2.0 * seg.c + 6.0 * seg.d * dx,
                )
        raise ValueError("point lies outside the spline's domain")