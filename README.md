# rkode

Runge-Kutta solvers for ordinary differential equations, built on numpy.

The package offers:

- Adaptive embedded solvers with a proportional-integral step-size
  controller: `RKF45`, `RKTS54` (Tsitouras 5(4)) and `RKV65` in
  `rkode.low_order`, `RKV87` in `rkode.rkv87`, `RKV98` in `rkode.rkv98` and
  `RKV98NoInterp` in `rkode.rkv98_nointerp`.
- Dense output and interpolation between accepted steps for every adaptive
  solver except `RKV98NoInterp`.
- Fixed-step explicit solvers: `RK4` and `Midpoint` in `rkode.explicit`.

## Installation

```
pip install .
```

## Adaptive integration

The state can be any numpy array. The derivative function takes `(x, y)`
and returns an array of the same shape.

```python
import math
import numpy as np

from rkode.types import RKAdaptiveSettings
from rkode.rkv98 import RKV98

def ydot(x, y):
    return np.array([y[1], -y[0]])

settings = RKAdaptiveSettings(abserror=1e-12, relerror=1e-12, dense_output=True)
sol = RKV98.integrate(0.0, math.pi, np.array([1.0, 0.0]), ydot, settings)

print(sol.x, sol.y)                        # final x and state
print(sol.naccept, sol.nreject, sol.nevals)
print(RKV98.interpolate(1.0, sol))         # close to [cos(1), -sin(1)]
```

`integrate` returns an `ODESolution` holding the final `x` and `y`, the
counts of accepted and rejected steps and of derivative evaluations, and,
when dense output is enabled, a `DenseOutput` in `dense` with the start
point, step size, starting state and stage derivatives of every accepted
step.

Integration runs backward when `stop < start`. Interpolation needs
`dense_output=True`; asking for a point outside the integrated range raises
`InterpExceedsSolutionBounds`, and a solution without dense output raises
`NoDenseOutputInSolution`. `RKV98NoInterp.interpolate` always raises
`InterpNotImplemented`. A step whose error estimate is not finite raises
`StepErrorTooSmall`. All of these live in `rkode.types` and derive from
`ODEError`; `YDotError` is provided there for derivative functions to raise.

`RKAdaptiveSettings` defaults to absolute and relative tolerances of `1e-8`,
step factors between `0.2` (`minfac`) and `10` (`maxfac`), a safety factor
`gamma` of `0.9`, a minimum step `dtmin` of `1e-6` (a step this small is
accepted whatever its error), and dense output off.

`rkode.types.scaled_norm(y)` is the error norm the solvers use: the
Euclidean norm of `y` divided by the square root of its element count.

## Fixed-step integration

```python
from rkode.explicit import RK4

states = RK4.integrate(0.0, 2 * math.pi, 1e-3, np.array([1.0, 0.0]), ydot)
print(states[-1])
```

`integrate` takes `ceil((xend - x0) / dx)` steps and returns the list of
states after each step; `step(x0, y0, h, ydot)` takes a single step.

## What it does not do

The package is a library only: it has no command-line tool, and it holds no
force models or physical constants; derivative functions are supplied by the
caller.