"""Command-line reports on grids, spline interpolation and numerical differentiation."""

from __future__ import annotations

import argparse
import math
from itertools import pairwise

from .differentiation import three_point_central, two_point_forward
from .grid import adaptive_grid, uniform_grid
from .point import Point
from .spline import CubicSpline

__all__ = ["grid_report", "spline_report", "differentiation_report", "main"]

_A, _B = 0.05, 0.30


def grid_report() -> str:
    """Describe a uniform and an adaptive grid on the working interval."""
    segments = 5
    ratio = 1.2
    lines = [
        "=== Тест генератора сеток ===",
        f"Отрезок: [{_A}, {_B}]",
        f"Сегментов: {segments}",
        f"Коэффициент разрядки: {ratio}",
        "",
    ]

    uniform = uniform_grid(_A, _B, segments)
    lines.append("Равномерная сетка:")
    lines.append("".join(f"{p.x:.6f} " for p in uniform))
    lines.append("")

    adaptive = adaptive_grid(_A, _B, segments, ratio)
    lines.append(f"Адаптивная сетка (r={ratio:.6f}):")
    lines.append("".join(f"{p.x:.6f} " for p in adaptive))

    lines.append("Шаги адаптивной сетки:")
    steps = [q.x - p.x for p, q in pairwise(adaptive)]
    previous = None
    for number, step in enumerate(steps, start=1):
        relation = 1.0 if previous is None else step / previous
        lines.append(f"h{number} = {step:.6f} (отношение: {relation:.6f})")
        previous = step
    return "\n".join(lines)


def spline_report() -> str:
    """Tabulate cubic-spline errors for sin(x) on three nested grids."""
    func, deriv, deriv2 = math.sin, math.cos, (lambda x: -math.sin(x))

    base_segments = 6
    base_h = (_B - _A) / base_segments
    test_points = [0.06, 0.068, 0.087, 0.106, 0.125, 0.144, 0.163, 0.182, 0.201, 0.220]

    lines = [
        "",
        "=== Исследование сплайна на вложенных сетках ===",
        f"Сетка h = {base_h:.3f} (сегментов: {base_segments})",
    ]

    for factor in (1, 2, 4):
        segments = base_segments * factor
        lines.append("")
        lines.append(f"Сетка h = {base_h / factor:.3f} (сегментов: {segments})")

        nodes = uniform_grid(_A, _B, segments)
        spline = CubicSpline()
        spline.update(nodes, [func(p.x) for p in nodes])

        lines.append(
            "x\t\tf(x)\t\tS(x)\t\tОшибка\t\tf'(x)\t\tS'(x)\t\tОшибка'\t\t"
            "f''(x)\t\tS''(x)\t\tОшибка''"
        )
        lines.append("-" * 120)

        max_errors = [0.0, 0.0, 0.0]
        for x in test_points:
            result = spline.evaluate(Point(x))
            exact = (func(x), deriv(x), deriv2(x))
            approx = (result.value, result.first, result.second)
            errors = [abs(e - s) for e, s in zip(exact, approx)]
            max_errors = [max(m, e) for m, e in zip(max_errors, errors)]
            lines.append(
                f"{x:.6f}\t{exact[0]:.8f}\t{approx[0]:.8f}\t{errors[0]:.2e}\t"
                f"{exact[1]:.6f}\t{approx[1]:.6f}\t{errors[1]:.2e}\t"
                f"{exact[2]:.6f}\t{approx[2]:.6f}\t{errors[2]:.2e}"
            )

        lines.append("")
        lines.append("Максимальные погрешности:")
        lines.append(
            f"Функции = {max_errors[0]:.2e}, производной 1-ой = {max_errors[1]:.2e}, "
            f"производной 2-ой = {max_errors[2]:.2e}"
        )
    return "\n".join(lines)


def differentiation_report() -> str:
    """Compare forward, backward and central differences for sin(x)."""
    func = math.sin
    center = (_A + _B) / 2.0
    exact = math.cos(center)

    lines = [
        "",
        "=== Численное дифференцирование (пункт 4) ===",
        f"Центральная точка: x = {center:.3f}",
        f"Точное значение: f'({center:.3f}) = {exact:.6f}",
        "Требуемая точность: ε = 0.01",
        "",
        "h\t\tПравая разн.\tЛевая разн.\tЦентр. разн.\t"
        "Ошибка прав.\tОшибка лев.\tОшибка центр.",
        "-" * 100,
    ]

    for h in (0.7, 0.5, 0.11, 0.01, 0.005, 0.0025, 0.00125):
        right = two_point_forward(func, center, h)
        left = (func(center) - func(center - h)) / h
        central = three_point_central(func, center, h)
        lines.append(
            f"{h:.3f}\t\t{right:.6f}\t{left:.6f}\t{central:.6f}\t"
            f"{abs(right - exact):.2e}\t{abs(left - exact):.2e}\t"
            f"{abs(central - exact):.2e}"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print all three reports."""
    parser = argparse.ArgumentParser(
        prog="splinelab",
        description="Grid, cubic spline and numerical differentiation reports.",
    )
    parser.parse_args(argv)
    print(grid_report())
    print(spline_report())
    print(differentiation_report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())