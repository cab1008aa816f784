"""Adaptive Runge-Kutta methods of orders four to six."""

from __future__ import annotations

from .adaptive import RKAdaptive


class RKF45(RKAdaptive):
    """Runge-Kutta-Fehlberg 4(5) method."""

    A = (
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (0.25, 0.0, 0.0, 0.0, 0.0, 0.0),
        (3.0 / 32.0, 9.0 / 32.0, 0.0, 0.0, 0.0, 0.0),
        (1932.0 / 2197.0, -7200.0 / 2197.0, 7296.0 / 2197.0, 0.0, 0.0, 0.0),
        (439.0 / 216.0, -8.0, 3680.0 / 513.0, -845.0 / 4104.0, 0.0, 0.0),
        (-8.0 / 27.0, 2.0, -3544.0 / 2565.0, 1859.0 / 4104.0, -11.0 / 40.0, 0.0),
    )
    B = (
        16.0 / 135.0,
        0.0,
        6656.0 / 12825.0,
        28561.0 / 56430.0,
        -9.0 / 50.0,
        2.0 / 55.0,
    )
    BI = tuple((coef,) for coef in B)
    _BSTAR = (25.0 / 216.0, 0.0, 1408.0 / 2565.0, 2197.0 / 4104.0, -0.2, 0.0)
    BERR = tuple(bstar - b for bstar, b in zip(_BSTAR, B))
    C = (0.0, 0.25, 3.0 / 8.0, 12.0 / 13.0, 1.0, 0.5)
    ORDER = 4
    FSAL = False


# Tsitouras 5(4) coefficients.  The published error weights carry the wrong
# sign on the last entry; it should be -1/66.
_A32 = 0.335480655492357
_A42 = -6.359448489975075
_A52 = -11.74888356406283
_A43 = 4.362295432869581
_A53 = 7.495539342889836
_A54 = -0.09249506636175525
_A62 = -12.92096931784711
_A63 = 8.159367898576159
_A64 = -0.071584973281401
_A65 = -0.02826905039406838

_BI11 = -1.0530884977290216
_BI12 = -1.329989018975141
_BI13 = -1.4364028541716351
_BI14 = 0.7139816917074209

_BI21 = 0.1017
_BI22 = -2.1966568338249754
_BI23 = 1.294985250737463

_BI31 = 2.490627285651253
_BI32 = -2.3853564547206165
_BI33 = 1.5780346820809248

_BI41 = -16.548102889244902
_BI42 = -1.2171292729553325
_BI43 = -0.6162040603780009

_BI51 = 47.37952196281928
_BI52 = -1.2030712083723627
_BI53 = -0.6580472926535473

_BI61 = -34.87065786149661
_BI62 = -1.2
_BI63 = -2.0 / 3.0

_BI71 = 2.5
_BI72 = -1.0
_BI73 = -0.6

_TS54_C = (0.0, 0.161, 0.327, 0.9, 0.9800255409045097, 1.0, 1.0)
_TS54_B = (
    0.09646076681806523,
    0.01,
    0.4798896504144996,
    1.379008574103742,
    -3.290069515436081,
    2.324710524099774,
    0.0,
)


class RKTS54(RKAdaptive):
    """Tsitouras 5(4) method with a fourth-degree interpolant."""

    C = _TS54_C
    B = _TS54_B
    BERR = (
        0.001780011052226,
        0.000816434459657,
        -0.007880878010262,
        0.144711007173263,
        -0.582357165452555,
        0.458082105929187,
        -1.0 / 66.0,
    )
    A = (
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (_TS54_C[1], 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (_TS54_C[2] - _A32, _A32, 0.0, 0.0, 0.0, 0.0, 0.0),
        (_TS54_C[3] - _A42 - _A43, _A42, _A43, 0.0, 0.0, 0.0, 0.0),
        (_TS54_C[4] - _A52 - _A53 - _A54, _A52, _A53, _A54, 0.0, 0.0, 0.0),
        (
            _TS54_C[5] - _A62 - _A63 - _A64 - _A65,
            _A62,
            _A63,
            _A64,
            _A65,
            0.0,
            0.0,
        ),
        _TS54_B,
    )
    ORDER = 5
    FSAL = False
    BI = (
        (
            _BI11 * _BI12 * _BI14,
            _BI11 * (_BI14 + _BI12 * _BI13),
            _BI11 * (_BI13 + _BI12),
            _BI11,
        ),
        (0.0, _BI21 * _BI23, _BI21 * _BI22, _BI21),
        (0.0, _BI31 * _BI33, _BI31 * _BI32, _BI31),
        (0.0, _BI41 * _BI42 * _BI43, _BI41 * (_BI42 + _BI43), _BI41),
        (0.0, _BI51 * _BI52 * _BI53, _BI51 * (_BI52 + _BI53), _BI51),
        (0.0, _BI61 * _BI62 * _BI63, _BI61 * (_BI62 + _BI63), _BI61),
        (0.0, _BI71 * _BI72 * _BI73, _BI71 * (_BI72 + _BI73), _BI71),
    )


_RKV65_BHAT = (
    0.0490996764838249,
    0.0,
    0.0,
    0.22511122295165242,
    0.4694682253029562,
    0.8065792249988868,
    0.0,
    -0.607119489177796,
    0.056861139440475696,
    0.0,
)


class RKV65(RKAdaptive):
    """Verner 6(5) efficient method with a sixth-degree interpolant."""

    ORDER = 6
    FSAL = False
    BI = (
        (
            1.0,
            -5.308169607103577,
            10.18168044895868,
            -7.520036991611715,
            0.9340485368631161,
            0.746867191577065,
        ),
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (
            0.0,
            6.272050253212501,
            -16.02618147467746,
            12.844356324519618,
            -1.1487945044767591,
            -1.6831681430145498,
        ),
        (
            0.0,
            6.876491702846304,
            -24.635767260846333,
            33.21078648379717,
            -17.49461528263644,
            2.4640414758066496,
        ),
        (
            0.0,
            -35.5444517105996,
            165.7016170190242,
            -385.4635395491143,
            442.43241370157017,
            -182.7206429912112,
        ),
        (
            0.0,
            1918.6548566980114,
            -9268.121508966042,
            20858.33702877255,
            -22645.82767158481,
            8960.474176055992,
        ),
        (
            0.0,
            -1883.0698021327182,
            9101.025187200634,
            -20473.188551959534,
            22209.765551256532,
            -8782.1682509635,
        ),
        (
            0.0,
            0.11902479635123643,
            -0.12502696705039376,
            1.7799569193949991,
            -4.660932123043763,
            2.886977374347921,
        ),
        (0.0, -8.0, 32.0, -40.0, 16.0, 0.0),
    )
    C = (
        0.0,
        0.06,
        0.09593333333333333,
        0.1439,
        0.4973,
        0.9725,
        0.9995,
        1.0,
        1.0,
        0.5,
    )
    B = (
        0.03438957868357036,
        0.0,
        0.0,
        0.2582624555633503,
        0.4209371189673537,
        4.40539646966931,
        -176.48311902429865,
        172.36413340141507,
        0.0,
        0.0,
    )
    BERR = tuple(b - bhat for b, bhat in zip(B, _RKV65_BHAT))
    A = (
        (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (0.06, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (
            0.019239962962962962,
            0.07669337037037037,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
        ),
        (0.035975, 0.0, 0.107925, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
        (
            1.3186834152331484,
            0.0,
            -5.042058063628562,
            4.220674648395414,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
        ),
        (
            -41.872591664327516,
            0.0,
            159.4325621631375,
            -122.11921356501003,
            5.531743066200054,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
        ),
        (
            -54.430156935316504,
            0.0,
            207.06725136501848,
            -158.61081378459,
            6.991816585950242,
            -0.018597231062203234,
            0.0,
            0.0,
            0.0,
            0.0,
        ),
        (
            -54.66374178728198,
            0.0,
            207.95280625538936,
            -159.2889574744995,
            7.018743740796944,
            -0.018338785905045722,
            -0.0005119484997882099,
            0.0,
            0.0,
            0.0,
        ),
        (
            0.03438957868357036,
            0.0,
            0.0,
            0.2582624555633503,
            0.4209371189673537,
            4.40539646966931,
            -176.48311902429865,
            172.36413340141507,
            0.0,
            0.0,
        ),
        (
            0.016524159013572806,
            0.0,
            0.0,
            0.3053128187514179,
            0.2071200938201979,
            -1.293879140655123,
            57.11988411588149,
            -55.87979207510932,
            0.024830028297766014,
            0.0,
        ),
    )