"""Verner 9(8) robust adaptive Runge-Kutta method with an eighth-degree interpolant."""

from __future__ import annotations

from .adaptive import RKAdaptive

_NSTAGES = 21


def _row(*coefs: float) -> tuple:
    """Pad a lower-triangular tableau row with zeros to the full stage count."""
    return tuple(coefs) + (0.0,) * (_NSTAGES - len(coefs))


_ZERO8 = (0.0,) * 8

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


class RKV98(RKAdaptive):
    """Verner 9(8) robust method with dense output."""

    ORDER = 9
    FSAL = False

    BI = (
        (
            1.0,
            -12.749665417715761,
            68.53080766672322,
            -194.81197453541841,
            317.8426371352858,
            -299.71554095933965,
            152.11191864204122,
            -32.19357055471806,
        ),
        _ZERO8,
        _ZERO8,
        _ZERO8,
        _ZERO8,
        _ZERO8,
        _ZERO8,
        (
            0.0,
            141.06960925337125,
            -1283.7684506465937,
            4630.280061766681,
            -8648.500976100317,
            8890.812161067019,
            -4787.949212676938,
            1057.6652861505438,
        ),
        (
            0.0,
            -51.75101323451538,
            486.04125073129313,
            -1777.4755863685239,
            3345.4982386497913,
            -3455.7624800073663,
            1867.0811612903115,
            -413.4004778109618,
        ),
        (
            0.0,
            16.320820086958964,
            -118.70727409667467,
            379.8980653294656,
            -659.1980179681816,
            645.012709496887,
            -335.39236302947796,
            72.1935368580219,
        ),
        (
            0.0,
            -5.897787927512738,
            89.61427156602281,
            -381.3887877052767,
            773.096419986775,
            -834.1212536283263,
            463.62091519336,
            -104.69913406742172,
        ),
        (
            0.0,
            -211.57535782939428,
            1922.1497472079566,
            -6927.544647063403,
            12933.891311491838,
            -13292.722522361093,
            7157.200591588666,
            -1580.8306877655953,
        ),
        (
            0.0,
            -29.643151549733865,
            265.61614526688027,
            -951.3146379152785,
            1769.8766279541082,
            -1814.9261587322417,
            975.7252379518513,
            -215.2758042600138,
        ),
        (
            0.0,
            -78.71890822220323,
            702.2030963698086,
            -2509.7836185277915,
            4663.884687403353,
            -4779.049763533835,
            2567.9693603757364,
            -566.3684221247208,
        ),
        (
            0.0,
            -20.192815666804382,
            179.36372579491186,
            -639.812626073269,
            1187.62303559744,
            -1216.083146478911,
            653.1305166034912,
            -143.99811963702805,
        ),
        _ZERO8,
        (
            0.0,
            22.255291729370043,
            -202.2768882656564,
            741.4504035959391,
            -1420.1713758196465,
            1506.8267592839097,
            -842.0883145405746,
            194.00412401665866,
        ),
        (
            0.0,
            14.877639873605062,
            -312.28405127853466,
            1842.5066172161532,
            -4868.899648863079,
            6508.346688203268,
            -4307.866481530869,
            1123.3192363794567,
        ),
        (
            0.0,
            94.98456650525378,
            -820.5775654295435,
            2818.347256898649,
            -4992.649725157523,
            4835.804647435805,
            -2434.068718877444,
            498.15953862480217,
        ),
        (
            0.0,
            63.46082596146032,
            -387.6244695782448,
            652.6008727039381,
            222.00209760007996,
            -1696.5553633451864,
            1674.0583351968428,
            -527.94229853889,
        ),
        (
            0.0,
            57.559946437860184,
            -588.280345308349,
            2317.048600678135,
            -4624.295311909927,
            5002.13326355941,
            -2803.5329461869956,
            639.3667927298665,
        ),
    )

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
        1.0,
        0.7404185470631561,
        0.888,
        0.696,
        0.487,
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
        _B,
        _row(
            0.015499736681895594,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.3355153219059635,
            0.20036139441918607,
            0.12520606592835493,
            0.22986763931842066,
            -0.20202506534761813,
            0.05917103230665457,
            -0.026518347830476387,
            -0.023840946021309713,
            0.0,
            0.027181715702085017,
        ),
        _row(
            0.013024539431143383,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.7452850902413112,
            0.2643867896429301,
            0.1313961758372754,
            0.21672538151229273,
            0.8734117564076053,
            0.011859056439357767,
            0.05876002941689551,
            0.003266518630202088,
            0.0,
            -0.00895930864841793,
            0.06941415157202692,
        ),
        _row(
            0.013970899969259426,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.46657653359576745,
            0.24163727872162571,
            0.12903633413456747,
            0.22167006717351054,
            0.6257275123364645,
            0.04355312415679284,
            0.10119624916672908,
            0.01808582254679721,
            0.0,
            -0.020798755876891697,
            -0.09022232517086219,
            -0.12127967356222542,
        ),
        _row(
            0.016046388883181127,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.09517712399458336,
            0.13591872646553177,
            0.1237765280959854,
            0.2335656264102966,
            -0.09051508172625873,
            -0.02537574270006131,
            -0.13596316968871622,
            -0.04679214284145113,
            0.0,
            0.05177958859391748,
            0.09672595677476774,
            0.14773126903407427,
            -0.11507507129585039,
        ),
    )