"""Fixed-step explicit Runge-Kutta methods."""

from __future__ import annotations

import math
from typing import Callable, ClassVar, Sequence

import numpy as np


class RKExplicit:
    """Fixed-step explicit Runge-Kutta method defined by a Butcher tableau."""

    A: ClassVar[Sequence[Sequence[float]]] = ()
    B: ClassVar[Sequence[float]] = ()
    C: ClassVar[Sequence[float]] = ()

    @classmethod
    def step(
        cls,
        x0: float,
        y0,
        h: float,
        ydot: Callable[[float, np.ndarray], np.ndarray],
    ) -> np.ndarray:
        """Advance the state ``y0`` at ``x0`` by one step of size ``h``."""
        a = np.asarray(cls.A, dtype=float)
        b = np.asarray(cls.B, dtype=float)
        c = np.asarray(cls.C, dtype=float)
        y = np.asarray(y0, dtype=float)

        k = np.empty((len(b),) + y.shape)
        k[0] = ydot(x0, y.copy())
        for stage in range(1, len(b)):
            ystage = y + np.tensordot(a[stage, :stage], k[:stage], axes=1) * h
            k[stage] = ydot(h * c[stage] + x0, ystage)
        return y + np.tensordot(b, k, axes=1) * h

    @classmethod
    def integrate(
        cls,
        x0: float,
        xend: float,
        dx: float,
        y0,
        ydot: Callable[[float, np.ndarray], np.ndarray],
    ) -> list:
        """Integrate from ``x0`` to ``xend`` in steps of ``dx``; return each new state."""
        steps = max(0, math.ceil((xend - x0) / dx))
        x = x0
        y = np.asarray(y0, dtype=float)
        states = []
        for _ in range(steps):
            y = cls.step(x, y, dx, ydot)
            states.append(y)
            x = min(x + dx, xend)
        return states


class RK4(RKExplicit):
    """Classic fourth-order Runge-Kutta method."""

    A = (
        (0.0, 0.0, 0.0, 0.0),
        (0.5, 0.0, 0.0, 0.0),
        (0.0, 0.5, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
    )
    B = (1.0 / 6.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 6.0)
    C = (0.0, 0.5, 0.5, 1.0)


class Midpoint(RKExplicit):
    """Explicit midpoint method."""

    A = ((0.0, 0.0), (0.5, 0.0))
    B = (0.0, 1.0)
    C = (0.0, 0.5)