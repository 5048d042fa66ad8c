"""Grids, natural cubic splines and finite-difference derivatives."""

__version__ = "0.1.0"
__all__ = ["point", "grid", "spline", "differentiation", "cli"]