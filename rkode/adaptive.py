"""Adaptive explicit Runge-Kutta integration with optional dense output."""

from __future__ import annotations

from typing import Callable, ClassVar, Sequence

import numpy as np

from .types import (
    DenseOutput,
    InterpExceedsSolutionBounds,
    NoDenseOutputInSolution,
    ODESolution,
    RKAdaptiveSettings,
    StepErrorTooSmall,
    scaled_norm,
)


class RKAdaptive:
    """Adaptive Runge-Kutta method defined by a Butcher tableau.

    Subclasses provide the tableau ``A``, ``C``, ``B``, the error weights
    ``BERR``, the interpolation coefficients ``BI`` and the method ``ORDER``.
    """

    A: ClassVar[Sequence[Sequence[float]]] = ()
    C: ClassVar[Sequence[float]] = ()
    B: ClassVar[Sequence[float]] = ()
    BERR: ClassVar[Sequence[float]] = ()
    BI: ClassVar[Sequence[Sequence[float]]] = ()
    ORDER: ClassVar[int] = 1
    FSAL: ClassVar[bool] = False

    @classmethod
    def interpolate(cls, xinterp: float, sol: ODESolution) -> np.ndarray:
        """Interpolate a dense solution at ``xinterp``."""
        dense = sol.dense
        if dense is None:
            raise NoDenseOutputInSolution()
        start = dense.x[0]

        if sol.x > start:
            if sol.x < xinterp or xinterp < start:
                raise InterpExceedsSolutionBounds(xinterp, start, sol.x)
            idx = next(
                (i for i, xv in enumerate(dense.x) if xv >= xinterp), len(dense.x)
            )
        else:
            if sol.x > xinterp or xinterp > start:
                raise InterpExceedsSolutionBounds(xinterp, start, sol.x)
            idx = next(
                (i for i, xv in enumerate(dense.x) if xv <= xinterp), len(dense.x)
            )
        idx = max(idx - 1, 0)

        h = dense.h[idx]
        t = (xinterp - dense.x[idx]) / h

        bi_table = np.asarray(cls.BI, dtype=float)
        powers = t ** np.arange(1, bi_table.shape[1] + 1)
        bi = bi_table @ powers

        k = np.asarray(dense.yprime[idx], dtype=float)
        return (np.asarray(dense.y[idx], dtype=float) / h + np.tensordot(bi, k, axes=1)) * h

    @classmethod
    def integrate(
        cls,
        start: float,
        stop: float,
        y0,
        ydot: Callable[[float, np.ndarray], np.ndarray],
        settings: RKAdaptiveSettings,
    ) -> ODESolution:
        """Integrate ``ydot`` from ``start`` to ``stop`` beginning at ``y0``."""
        a = np.asarray(cls.A, dtype=float)
        c = np.asarray(cls.C, dtype=float)
        b = np.asarray(cls.B, dtype=float)
        berr = np.asarray(cls.BERR, dtype=float)
        berr = np.where(np.abs(berr) > 1.0e-9, berr, 0.0)
        nstages = len(b)

        nevals = 0
        naccept = 0
        nreject = 0
        x = start
        y = np.array(y0, dtype=float)

        qold = 1.0e-4
        tdir = 1.0 if stop > start else -1.0

        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            sci = np.abs(y) * settings.relerror + settings.abserror
            d0 = np.float64(scaled_norm(y / sci))
            ydot0 = np.asarray(ydot(start, y.copy()), dtype=float)
            d1 = np.float64(scaled_norm(ydot0 / sci))
            h0 = 0.01 * d0 / d1 * tdir
            y1 = y + ydot0 * h0
            ydot1 = np.asarray(ydot(start + h0, y1), dtype=float)
            d2 = np.float64(scaled_norm((ydot1 - ydot0) / sci)) / h0
            dmax = np.fmax(d1, d2)
            if dmax < 1e-15:
                h1 = np.fmax(1e-6, abs(h0) * 1e-3)
            else:
                h1 = 10.0 ** (-(2.0 + np.log10(dmax)) / cls.ORDER)
            h = float(np.fmin(100.0 * abs(h0), abs(h1)) * tdir)
        nevals += 2

        dense = DenseOutput() if settings.dense_output else None

        beta1 = 7.0 / (5.0 * cls.ORDER)
        beta2 = 2.0 / (5.0 * cls.ORDER)

        while True:
            if (tdir > 0.0 and x + h >= stop) or (tdir < 0.0 and x + h <= stop):
                h = stop - x

            k = np.empty((nstages,) + y.shape)
            k[0] = ydot(x, y.copy())
            for stage in range(1, nstages):
                ystage = y + np.tensordot(a[stage, :stage], k[:stage], axes=1) * h
                k[stage] = ydot(h * c[stage] + x, ystage)

            ynp1 = (y / h + np.tensordot(b, k, axes=1)) * h
            yerr = np.tensordot(berr, k, axes=1) * h

            ymax = np.maximum(np.abs(y), np.abs(ynp1)) * settings.relerror
            ymax = ymax + settings.abserror
            with np.errstate(divide="ignore", invalid="ignore"):
                enorm = scaled_norm(yerr / ymax)
            nevals += nstages

            if not np.isfinite(enorm):
                raise StepErrorTooSmall()

            q11 = enorm**beta1
            q = q11 / qold**beta2
            q = max(1.0 / settings.maxfac, min(1.0 / settings.minfac, q / settings.gamma))

            if enorm < 1.0 or abs(h) <= settings.dtmin:
                if dense is not None:
                    dense.x.append(x)
                    dense.h.append(h)
                    dense.yprime.append(k)
                    dense.y.append(y.copy())

                qold = max(enorm, 1.0e-4)
                x += h
                y = ynp1
                h /= q

                naccept += 1
                if (tdir > 0.0 and x >= stop) or (tdir < 0.0 and x <= stop):
                    break
            else:
                nreject += 1
                h /= min(1.0 / settings.minfac, q11 / settings.gamma)

        return ODESolution(
            nevals=nevals,
            naccept=naccept,
            nreject=nreject,
            x=x,
            y=y,
            dense=dense,
        )