# splinelab

A small numerical-methods toolkit: one-dimensional grids, a natural cubic
spline and finite-difference derivatives. It uses only the standard library.

## Modules

- `splinelab.point`: `Point(x=0.0, y=0.0, z=0.0)`, an immutable point.
  Grids and splines use only its `x` coordinate.
- `splinelab.grid`
  - `uniform_grid(a, b, segments)` returns `segments + 1` equally spaced points
    from `a` to `b`. It raises `ValueError` if `segments` is not positive.
  - `adaptive_grid(a, b, segments, r)` returns `segments + 1` points on
    `[a, b]`. Each step is `r` times the step before it. If `r` is within
    `1e-10` of 1, the grid is uniform.
- `splinelab.spline`
  - `Spline` is the abstract interface. It has `update(nodes, values)` and
    `evaluate(point)`.
  - `CubicSpline` is a natural cubic spline, with a zero second derivative at
    both ends.
    - `update(nodes, values)` builds the spline. It raises `ValueError` when
      there are fewer than two nodes, or when the number of values does not
      match the number of nodes.
    - `evaluate(point)` returns a `SplineValue` with the fields `value`,
      `first` and `second`. It raises `ValueError` when the point lies outside
      the node range; the check allows a tolerance of `1e-10`.
- `splinelab.differentiation`
  - `two_point_forward(func, x, h)`: forward difference.
  - `three_point_central(func, x, h)`: central difference.
  - `five_point_central(func, x, h)`: five-point central difference.
  - `compute_derivative(func, x, epsilon)` returns the forward difference with
    a fixed step of 0.01 and prints the method, the step and the result. The
    `epsilon` argument does not change the step.
- `splinelab.cli`: `grid_report()`, `spline_report()` and
  `differentiation_report()` each return a report as a string. `main()` prints
  all three.

## Example

```python
import math

from splinelab.grid import uniform_grid
from splinelab.point import Point
from splinelab.spline import CubicSpline

nodes = uniform_grid(0.05, 0.30, 12)
spline = CubicSpline()
spline.update(nodes, [math.sin(p.x) for p in nodes])

result = spline.evaluate(Point(0.1))
print(result.value, result.first, result.second)
```

## Command line

```
splinelab
```

The command takes no options apart from `--help`. It prints three reports:

- a uniform grid and an adaptive grid (ratio 1.2) on [0.05, 0.30], with the
  adaptive grid's steps;
- error tables for a cubic spline of sin(x) on three nested grids, with 6, 12
  and 24 segments;
- a table of forward, backward and central difference errors for the
  derivative of sin(x) at the middle of the interval.

## Limitations

The interval, the test function, the grid sizes and the step lengths in the
reports are fixed. The command cannot read data from files or take a function
from the user. Use the library functions for other inputs.

## Tests

```
pip install -e ".[test]"
pytest
```