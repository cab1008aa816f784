"""Verner 8(7) robust adaptive Runge-Kutta method with a seventh-degree interpolant."""

from __future__ import annotations

from .adaptive import RKAdaptive

_NSTAGES = 17


def _row(*coefs: float) -> tuple:
    """Pad a lower-triangular tableau row with zeros to the full stage count."""
    return tuple(coefs) + (0.0,) * (_NSTAGES - len(coefs))


_BHAT = (
    0.045847111400495924,
    0.0,
    0.0,
    0.0,
    0.0,
    0.26231891404152385,
    0.1916937233785261,
    0.21709172327902618,
    0.12738189624833707,
    0.11510530385365327,
    0.0,
    0.0,
    0.04056132779843757,
    0.0,
    0.0,
    0.0,
    0.0,
)

_ZERO7 = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


class RKV87(RKAdaptive):
    """Verner 8(7) robust method."""

    ORDER = 8
    FSAL = False

    BI = (
        (
            1.0,
            -10.951475872296147,
            59.3979789938555,
            -169.07814288909987,
            253.76494604998652,
            -188.81689309394793,
            54.72831637616858,
        ),
        _ZERO7,
        _ZERO7,
        _ZERO7,
        _ZERO7,
        (
            0.0,
            -46.41241316458095,
            459.3688444435925,
            -1703.1864044099852,
            2931.7527048299316,
            -2358.2611360344335,
            716.8953146707524,
        ),
        (
            0.0,
            5.227285917918246,
            -52.1913881553668,
            196.4757401286307,
            -345.76457835624046,
            286.02332749703544,
            -89.58577729789559,
        ),
        (
            0.0,
            -139.78156531809682,
            1384.049425472941,
            -5135.222952667993,
            8848.685618357147,
            -7127.416107369449,
            2169.9107453314714,
        ),
        (
            0.0,
            -16.96405472831162,
            167.6990823447547,
            -620.4432204586683,
            1064.602309196311,
            -852.81538965844,
            258.06921946087385,
        ),
        (
            0.0,
            -35.50994970740374,
            351.5600123280243,
            -1304.1126480123212,
            2246.4586684264364,
            -1808.7373047938725,
            550.4172773015819,
        ),
        (
            0.0,
            -42.87270298332567,
            424.3841818542902,
            -1573.80018965322,
            2709.8648600079437,
            -2180.6429532403076,
            663.18957691697,
        ),
        (
            0.0,
            6.2183980075819,
            -61.68791833935997,
            229.64001121563882,
            -397.6368377365357,
            322.30600885615826,
            -98.79785004484431,
        ),
        _ZERO7,
        (
            0.0,
            -7.110162725994358,
            70.66890227222426,
            -263.96929792934156,
            459.47260661549853,
            -375.1621149018976,
            116.10006666951072,
        ),
        (
            0.0,
            70.40432711482234,
            -711.0254431217091,
            2707.8240926148737,
            -4757.02428761461,
            3882.6564342973243,
            -1192.8351232907007,
        ),
        (
            0.0,
            82.90873370326422,
            -817.3868372557513,
            3011.2279721727823,
            -5142.113838585539,
            4105.547441159415,
            -1240.1834711941715,
        ),
        (
            0.0,
            134.8435797564226,
            -1274.8368408374952,
            4624.645039888704,
            -7872.0621711903295,
            6295.318687282414,
            -1907.9082948997166,
        ),
    )

    C = (
        0.0,
        0.25,
        0.11288845144356956,
        0.16933267716535433,
        0.424,
        0.509,
        0.867,
        0.15,
        0.7090680365138684,
        0.32,
        0.45,
        1.0,
        1.0,
        0.0,
        0.3110177634953864,
        0.536,
        0.132,
    )

    B = (
        0.04472956466669571,
        0.0,
        0.0,
        0.0,
        0.0,
        0.156910335277082,
        0.18460973408151637,
        0.2251638060208699,
        0.14794615651970236,
        0.07605554244495583,
        0.1227729023501862,
        0.041811958638991634,
        0.0,
        0.0,
        0.0,
        0.0,
        0.0,
    )

    BERR = tuple(b - bhat for b, bhat in zip(B, _BHAT))

    A = (
        _row(),
        _row(0.25),
        _row(0.08740084650491524, 0.02548760493865432),
        _row(0.04233316929133858, 0.0, 0.12699950787401576),
        _row(0.4260950588874226, 0.0, -1.5987952846591522, 1.5967002257717298),
        _row(
            0.05071933729671393,
            0.0,
            0.0,
            0.2543337726460041,
            0.203946890057282,
        ),
        _row(
            -0.2900037471752311,
            0.0,
            0.0,
            1.344187391026079,
            -2.864777943361443,
            2.677594299510595,
        ),
        _row(
            0.09853501133799354,
            0.0,
            0.0,
            0.0,
            0.22192680630751385,
            -0.18140622911806994,
            0.010944411472562547,
        ),
        _row(
            0.38711052545731145,
            0.0,
            0.0,
            -1.4424454974855279,
            2.9053981890699507,
            -1.853771069630106,
            0.14003648098728155,
            0.5727394081149582,
        ),
        _row(
            -0.1612440344443931,
            0.0,
            0.0,
            -0.17339602957358985,
            -1.3012892814065147,
            1.1379503751738618,
            -0.03174764966396688,
            0.9335129382493367,
            -0.08378631833473385,
        ),
        _row(
            -0.019199444881589534,
            0.0,
            0.0,
            0.27330857265264286,
            -0.6753497320694437,
            0.34151849813846014,
            -0.06795006480337577,
            0.09659175224762388,
            0.13253082511182102,
            0.36854959360386114,
        ),
        _row(
            0.6091877403645289,
            0.0,
            0.0,
            -2.272569085898002,
            4.757898342694029,
            -5.516106706692758,
            0.2900596369680119,
            0.5691423963359037,
            0.7926795760332167,
            0.15473720453288822,
            1.6149708956621815,
        ),
        _row(
            0.8873576220853472,
            0.0,
            0.0,
            -2.975459782108537,
            5.600717009488163,
            -5.915607450536674,
            0.22029689156134927,
            0.10155097824462217,
            1.1514345647386055,
            1.929710166527124,
        ),
        _row(
            0.04472956466669571,
            0.0,
            0.0,
            0.0,
            0.0,
            0.156910335277082,
            0.18460973408151637,
            0.2251638060208699,
            0.14794615651970236,
            0.07605554244495583,
            0.1227729023501862,
            0.041811958638991634,
        ),
        _row(
            0.04584909962591746,
            0.0,
            0.0,
            0.0,
            0.0,
            0.00781870674437554,
            0.006155870622618811,
            0.2195571449623681,
            -0.012225817326973467,
            0.0326130049295883,
            0.012547978055204379,
            0.011296811426148919,
            0.0,
            -0.012595035543861663,
        ),
        _row(
            0.04167847284138613,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.40738491036998903,
            -0.02302256719981638,
            0.24823922426530162,
            0.07400026817560597,
            -0.19301418062597,
            0.6690280284382524,
            -0.010992295645101225,
            0.0,
            0.014803893689681396,
            0.1226640664306491,
        ),
        _row(
            0.05646609456796632,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.03522910440496785,
            0.06568161065081292,
            0.0738354516533015,
            -0.1925857315058937,
            0.03765563615652641,
            -0.518600904222035,
            0.0919027956974307,
            0.0,
            -0.10361346277812986,
            0.10519659107750214,
            0.5512910231074863,
        ),
    )