import math

import numpy as np
import pytest

from rkode.adaptive import RKAdaptive
from rkode.types import (
    InterpExceedsSolutionBounds,
    NoDenseOutputInSolution,
    RKAdaptiveSettings,
    StepErrorTooSmall,
    YDotError,
)

_B = (2.0 / 9.0, 1.0 / 3.0, 4.0 / 9.0, 0.0)
_BSTAR = (7.0 / 24.0, 1.0 / 4.0, 1.0 / 3.0, 1.0 / 8.0)


class BogackiShampine(RKAdaptive):
    A = (
        (0.0, 0.0, 0.0, 0.0),
        (0.5, 0.0, 0.0, 0.0),
        (0.0, 0.75, 0.0, 0.0),
        (2.0 / 9.0, 1.0 / 3.0, 4.0 / 9.0, 0.0),
    )
    C = (0.0, 0.5, 0.75, 1.0)
    B = _B
    BERR = tuple(b - bs for b, bs in zip(_B, _BSTAR))
    BI = tuple((b,) for b in _B)
    ORDER = 3


def oscillator(_x, y):
    return np.array([y[1], -y[0]])


def settings(dense=False):
    return RKAdaptiveSettings(abserror=1e-9, relerror=1e-9, dense_output=dense)


def test_exponential_decay():
    sol = BogackiShampine.integrate(0.0, 1.0, np.array([1.0]), lambda x, y: -y, settings())
    assert sol.x == 1.0
    assert abs(sol.y[0] - math.exp(-1.0)) < 1e-6


def test_harmonic_oscillator_forward():
    sol = BogackiShampine.integrate(0.0, math.pi, np.array([1.0, 0.0]), oscillator, settings())
    assert abs(sol.y[0] + 1.0) < 1e-6
    assert abs(sol.y[1]) < 1e-6


def test_harmonic_oscillator_backward():
    sol = BogackiShampine.integrate(
        0.0, -math.pi / 2, np.array([1.0, 0.0]), oscillator, settings()
    )
    assert sol.x == -math.pi / 2
    assert abs(sol.y[0]) < 1e-6
    assert abs(sol.y[1] - 1.0) < 1e-6


def test_evaluation_count_invariant():
    sol = BogackiShampine.integrate(0.0, 2.0, np.array([1.0, 0.0]), oscillator, settings())
    assert sol.nevals == 2 + 4 * (sol.naccept + sol.nreject)


def test_dense_output_records_each_accepted_step():
    sol = BogackiShampine.integrate(0.0, 1.0, np.array([1.0, 0.0]), oscillator, settings(True))
    assert len(sol.dense.x) == sol.naccept
    assert len(sol.dense.h) == sol.naccept
    assert len(sol.dense.y) == sol.naccept
    assert sol.dense.x[0] == 0.0


def test_interpolation_reproduces_step_points():
    sol = BogackiShampine.integrate(0.0, 1.0, np.array([1.0, 0.0]), oscillator, settings(True))
    dense = sol.dense
    for xk, yk in zip(dense.x[1:], dense.y[1:]):
        assert np.allclose(BogackiShampine.interpolate(xk, sol), yk, rtol=1e-10, atol=1e-12)
    assert np.allclose(BogackiShampine.interpolate(sol.x, sol), sol.y, rtol=1e-10, atol=1e-12)
    assert np.allclose(BogackiShampine.interpolate(0.0, sol), [1.0, 0.0])


def test_interpolation_between_steps_is_close():
    sol = BogackiShampine.integrate(0.0, math.pi, np.array([1.0, 0.0]), oscillator, settings(True))
    for x in np.linspace(0.0, math.pi, 25):
        y = BogackiShampine.interpolate(x, sol)
        assert abs(y[0] - math.cos(x)) < 1e-3
        assert abs(y[1] + math.sin(x)) < 1e-3


def test_backward_interpolation():
    sol = BogackiShampine.integrate(
        0.0, -math.pi, np.array([1.0, 0.0]), oscillator, settings(True)
    )
    for x in np.linspace(-math.pi, 0.0, 13):
        y = BogackiShampine.interpolate(x, sol)
        assert abs(y[0] - math.cos(x)) < 1e-3


def test_interpolate_without_dense_output_raises():
    sol = BogackiShampine.integrate(0.0, 1.0, np.array([1.0]), lambda x, y: -y, settings())
    with pytest.raises(NoDenseOutputInSolution):
        BogackiShampine.interpolate(0.5, sol)


@pytest.mark.parametrize("x", [-0.1, 1.1])
def test_interpolate_outside_forward_bounds(x):
    sol = BogackiShampine.integrate(0.0, 1.0, np.array([1.0]), lambda t, y: -y, settings(True))
    with pytest.raises(InterpExceedsSolutionBounds) as info:
        BogackiShampine.interpolate(x, sol)
    assert info.value.interp == x
    assert info.value.start == 0.0
    assert info.value.stop == 1.0


@pytest.mark.parametrize("x", [0.1, -1.1])
def test_interpolate_outside_backward_bounds(x):
    sol = BogackiShampine.integrate(0.0, -1.0, np.array([1.0]), lambda t, y: -y, settings(True))
    with pytest.raises(InterpExceedsSolutionBounds):
        BogackiShampine.interpolate(x, sol)


def test_non_finite_error_raises():
    with pytest.raises(StepErrorTooSmall):
        BogackiShampine.integrate(
            0.0, 1.0, np.array([1.0]), lambda x, y: np.array([np.nan]), settings()
        )


def test_ydot_errors_propagate():
    def failing(x, y):
        raise YDotError("broken")

    with pytest.raises(YDotError, match="broken"):
        BogackiShampine.integrate(0.0, 1.0, np.array([1.0]), failing, settings())


def test_matrix_state():
    y0 = np.array([[1.0, 2.0], [3.0, 4.0]])
    sol = BogackiShampine.integrate(0.0, 1.0, y0, lambda x, y: -y, settings())
    assert sol.y.shape == (2, 2)
    assert np.allclose(sol.y, y0 * math.exp(-1.0), rtol=1e-6)