import dataclasses
import math

import numpy as np
import pytest

from rkode.types import (
    DenseOutput,
    InterpExceedsSolutionBounds,
    InterpNotImplemented,
    NoDenseOutputInSolution,
    ODEError,
    ODESolution,
    RKAdaptiveSettings,
    StepErrorTooSmall,
    YDotError,
    scaled_norm,
)


@pytest.mark.parametrize("n", [1, 2, 5, 17])
def test_scaled_norm_of_constant_vector_is_the_constant(n):
    assert math.isclose(scaled_norm(np.full(n, 3.5)), 3.5)


def test_scaled_norm_ignores_shape():
    flat = np.array([1.0, -2.0, 3.0, -4.0])
    assert math.isclose(scaled_norm(flat.reshape(2, 2)), scaled_norm(flat))


def test_scaled_norm_of_zero_is_zero():
    assert scaled_norm(np.zeros((3, 2))) == 0.0


def test_scaled_norm_scales_linearly():
    v = np.array([0.3, -1.2, 4.0])
    assert math.isclose(scaled_norm(2.0 * v), 2.0 * scaled_norm(v))


def test_interp_bounds_error_carries_values():
    err = InterpExceedsSolutionBounds(1.5, 0.5, 1.25)
    assert (err.interp, err.start, err.stop) == (1.5, 0.5, 1.25)
    assert "1.5 not in [0.5, 1.25]" in str(err)


@pytest.mark.parametrize(
    "exc_type, text",
    [
        (StepErrorTooSmall, "Step error not finite"),
        (NoDenseOutputInSolution, "No Dense Output in Solution"),
        (InterpNotImplemented, "Interpolation not implemented for this integrator"),
    ],
)
def test_error_messages(exc_type, text):
    exc = exc_type()
    assert isinstance(exc, ODEError)
    assert str(exc) == text


def test_ydot_error_message():
    err = YDotError("bad input")
    assert err.message == "bad input"
    assert str(err) == "Y dot Function Error: bad input"


def test_settings_replace_keeps_other_fields():
    base = RKAdaptiveSettings()
    changed = dataclasses.replace(base, dense_output=True, abserror=1e-12)
    assert changed.dense_output is True
    assert changed.abserror == 1e-12
    assert changed.relerror == base.relerror
    assert changed.gamma == base.gamma


def test_dense_output_lists_are_independent():
    a = DenseOutput()
    b = DenseOutput()
    a.x.append(1.0)
    assert b.x == []


def test_solution_holds_fields():
    sol = ODESolution(nevals=10, naccept=2, nreject=1, x=2.0, y=np.array([1.0]))
    assert sol.dense is None
    assert sol.naccept + sol.nreject == 3
    assert sol.y.tolist() == [1.0]