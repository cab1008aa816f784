"""Verner 9(8) robust adaptive Runge-Kutta method without the interpolation stages."""

from __future__ import annotations

import numpy as np

from .adaptive import RKAdaptive
from .types import InterpNotImplemented, ODESolution

_NSTAGES = 16


def _row(*coefs: float) -> tuple:
    """Pad a lower-triangular tableau row with zeros to the full stage count."""
    return tuple(coefs) + (0.0,) * (_NSTAGES - len(coefs))


_B = _row(
    0.014611976858423152,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    -0.3915211862331339,
    0.23109325002895065,
    0.12747667699928525,
    0.2246434176204158,
    0.5684352689748513,
    0.058258715572158275,
    0.13643174034822156,
    0.030570139830827976,
)

_BHAT = _row(
    0.01996996514886773,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    2.19149930494933,
    0.08857071848208438,
    0.11405602348659656,
    0.2533163805345107,
    -2.056564386240941,
    0.340809679901312,
    0.0,
    0.0,
    0.048342313738239585,
)


class RKV98NoInterp(RKAdaptive):
    """Verner 9(8) robust method using only the sixteen integration stages.

    Cheaper per step than the dense-output variant, but it cannot interpolate.
    """

    ORDER = 9
    FSAL = False

    BI = ((1.0,),) + ((0.0,),) * (_NSTAGES - 1)

    C = (
        0.0,
        0.03462,
        0.09702435063878044,
        0.14553652595817068,
        0.561,
        0.229007911590485,
        0.544992088409515,
        0.645,
        0.48375,
        0.06757,
        0.25,
        0.6590650618730999,
        0.8206,
        0.9012,
        1.0,
        1.0,
    )

    B = _B

    BERR = tuple(b - bhat for b, bhat in zip(_B, _BHAT))

    A = (
        _row(),
        _row(0.03462),
        _row(-0.038933543885728734, 0.13595789452450918),
        _row(0.03638413148954267, 0.0, 0.109152394468628),
        _row(2.02576391439397, 0.0, -7.638023836496292, 6.173259922102322),
        _row(
            0.05112275589406061,
            0.0,
            0.0,
            0.17708237945550215,
            0.0008027762409222502,
        ),
        _row(
            0.13160063579752163,
            0.0,
            0.0,
            -0.29572762526696367,
            0.08781378035642952,
            0.6213052975225275,
        ),
        _row(
            0.07166666666666667,
            0.0,
            0.0,
            0.0,
            0.0,
            0.33055335789153195,
            0.24277997544180138,
        ),
        _row(
            0.071806640625,
            0.0,
            0.0,
            0.0,
            0.0,
            0.3294380283228177,
            0.11651900292718229,
            -0.034013671875,
        ),
        _row(
            0.04836757646340647,
            0.0,
            0.0,
            0.0,
            0.0,
            0.03928989925676164,
            0.10547409458903446,
            -0.021438652846483126,
            -0.10412291746271944,
        ),
        _row(
            -0.026645614872014785,
            0.0,
            0.0,
            0.0,
            0.0,
            0.03333333333333333,
            -0.1631072244872467,
            0.033960816841277615,
            0.1572319413814626,
            0.21522674780318796,
        ),
        _row(
            0.036890092487086225,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.1465181576725543,
            0.22425777681720244,
            0.022944057170660725,
            -0.003585005290572876,
            0.08669223316444385,
            0.43838406519683376,
        ),
        _row(
            -0.48660122151133406,
            0.0,
            0.0,
            0.0,
            0.0,
            -6.304602650282853,
            -0.2812456182894726,
            -2.6790192362198493,
            0.5188156639241576,
            1.3653531876033418,
            5.8850910885039465,
            2.8028087862720628,
        ),
        _row(
            0.41853674577534716,
            0.0,
            0.0,
            0.0,
            0.0,
            6.724547581906459,
            -0.4254442801646118,
            3.3432791530012658,
            0.6170816631175378,
            -0.9299661239399328,
            -6.099948804751011,
            -3.002206187889399,
            0.2553202529443446,
        ),
        _row(
            -0.7793740861228846,
            0.0,
            0.0,
            0.0,
            0.0,
            -13.937342538107776,
            1.2520488533793572,
            -14.69150040801687,
            -0.4947050585331417,
            2.2429749091462368,
            13.367893803828643,
            14.396650486650687,
            -0.79758133317768,
            0.4409353709534278,
        ),
        _row(
            2.0580513374668863,
            0.0,
            0.0,
            0.0,
            0.0,
            22.357937727968032,
            0.9094981099755634,
            35.89110098240264,
            -3.4425150276244536,
            -4.8654813580363685,
            -18.909803813543427,
            -34.26354448030452,
            1.2647565216956427,
        ),
    )

    @classmethod
    def interpolate(cls, xinterp: float, sol: ODESolution) -> np.ndarray:
        """Always raise: this method records no interpolation stages."""
        raise InterpNotImplemented()