"""Points in three-dimensional space."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Point"]


@dataclass(frozen=True)
class Point:
    """An immutable point; grids and splines only use the ``x`` coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0