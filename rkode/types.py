"""Errors, settings and result containers shared by the ODE solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np


class ODEError(Exception):
    """Base class for every error raised by the ODE solvers."""


class StepErrorTooSmall(ODEError):
    """The estimated step error is not a finite number."""

    def __init__(self) -> None:
        super().__init__("Step error not finite")


class NoDenseOutputInSolution(ODEError):
    """Interpolation was requested from a solution without dense output."""

    def __init__(self) -> None:
        super().__init__("No Dense Output in Solution")


class InterpExceedsSolutionBounds(ODEError):
    """The interpolation point lies outside the integrated interval."""

    def __init__(self, interp: float, start: float, stop: float) -> None:
        self.interp = interp
        self.start = start
        self.stop = stop
        super().__init__(
            f"Interpolation exceeds solution bounds: {interp} not in [{start}, {stop}]"
        )


class InterpNotImplemented(ODEError):
    """The integrator does not support interpolation."""

    def __init__(self) -> None:
        super().__init__("Interpolation not implemented for this integrator")


class YDotError(ODEError):
    """The derivative function failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Y dot Function Error: {message}")


def scaled_norm(y) -> float:
    """Euclidean norm of ``y`` divided by the square root of its element count."""
    arr = np.asarray(y, dtype=float)
    return float(np.linalg.norm(arr) / math.sqrt(arr.size))


@dataclass
class RKAdaptiveSettings:
    """Settings for adaptive Runge-Kutta integration."""

    abserror: float = 1.0e-8
    relerror: float = 1.0e-8
    minfac: float = 0.2
    maxfac: float = 10.0
    gamma: float = 0.9
    dtmin: float = 1.0e-6
    dense_output: bool = False


@dataclass
class DenseOutput:
    """Per-step data recorded when dense output is enabled.

    ``yprime`` holds, for each accepted step, the stage derivatives as an
    array of shape ``(stages, *state_shape)``.
    """

    x: list = field(default_factory=list)
    h: list = field(default_factory=list)
    yprime: list = field(default_factory=list)
    y: list = field(default_factory=list)


@dataclass
class ODESolution:
    """Final state of an integration together with its statistics."""

    nevals: int
    naccept: int
    nreject: int
    x: float
    y: np.ndarray
    dense: Optional[DenseOutput] = None