"""Finite-difference approximations of the first derivative."""

from __future__ import annotations

from typing import Callable

__all__ = [
    "two_point_forward",
    "three_point_central",
    "five_point_central",
    "compute_derivative",
]

Function = Callable[[float], float]


def two_point_forward(func: Function, x: float, h: float) -> float:
    """Forward difference ``(f(x+h) - f(x)) / h``."""
    return (func(x + h) - func(x)) / h


def three_point_central(func: Function, x: float, h: float) -> float:
    """Central difference ``(f(x+h) - f(x-h)) / 2h``."""
    return (func(x + h) - func(x - h)) / (2.0 * h)


def five_point_central(func: Function, x: float, h: float) -> float:
    """Fourth-order five-point central difference."""
    return (
        -func(x + 2.0 * h) + 8.0 * func(x + h) - 8.0 * func(x - h) + func(x - 2.0 * h)
    ) / (12.0 * h)


def compute_derivative(func: Function, x: float, epsilon: float) -> float:
    """Forward difference with a fixed step of 0.01, reporting the method used.

    ``epsilon`` is accepted for interface compatibility and does not affect the step.
    """
    h = 0.01
    derivative = two_point_forward(func, x, h)
    print("Метод: двухточечная разность")
    print(f"Шаг: h = {h}")
    print(f"Вычисленное значение: {derivative}")
    return derivative