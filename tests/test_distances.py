import math

import pytest

from ctspsched.distances import (
    TSPLIB_PI,
    EdgeWeightType,
    att_distance,
    ceil_2d_distance,
    distance_function,
    dtrunc,
    euc_2d_distance,
    geo_distance,
    man_2d_distance,
    max_2d_distance,
    nint,
    radian_coords,
)

POINTS = [
    (0.0, 0.0),
    (1150.0, 1760.0),
    (630.0, 1660.0),
    (-12.25, 7.5),
    (40.0, 40.0),
    (3.3, -8.9),
]

PAIRS = [(a, b) for a in POINTS for b in POINTS]

PLANAR_KINDS = [
    EdgeWeightType.EUC_2D,
    EdgeWeightType.MAX_2D,
    EdgeWeightType.MAN_2D,
    EdgeWeightType.CEIL_2D,
    EdgeWeightType.ATT,
]


def test_nint_rounds_half_up():
    assert nint(4.5) == 5
    assert nint(4.49) == 4
    assert nint(4.0) == 4


def test_nint_truncates_like_a_cast():
    assert nint(-0.4) == 0


def test_dtrunc_truncates_towards_zero():
    assert dtrunc(3.9) == 3.0
    assert dtrunc(-2.7) == -2.0


def test_radian_coords_origin():
    assert radian_coords((0.0, 0.0)) == (0.0, 0.0)


def test_radian_coords_uses_source_pi():
    longitude, latitude = radian_coords((180.0, 180.0))
    assert latitude == pytest.approx(TSPLIB_PI)
    assert longitude == pytest.approx(TSPLIB_PI)


@pytest.mark.parametrize("kind", PLANAR_KINDS)
@pytest.mark.parametrize("a,b", PAIRS)
def test_planar_distances_are_symmetric(kind, a, b):
    func = distance_function(kind)
    assert func(a, b) == func(b, a)


@pytest.mark.parametrize("kind", PLANAR_KINDS)
@pytest.mark.parametrize("p", POINTS)
def test_planar_distance_to_self_is_zero(kind, p):
    func = distance_function(kind)
    assert func(p, p) == 0.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_euc_2d_is_rounded_euclidean(a, b):
    exact = math.dist(a, b)
    d = euc_2d_distance(a, b)
    assert d == int(d)
    assert abs(d - exact) <= 0.5


@pytest.mark.parametrize("a,b", PAIRS)
def test_ceil_2d_is_rounded_up(a, b):
    exact = math.dist(a, b)
    d = ceil_2d_distance(a, b)
    assert exact <= d < exact + 1


@pytest.mark.parametrize("a,b", PAIRS)
def test_metric_ordering(a, b):
    assert max_2d_distance(a, b) <= euc_2d_distance(a, b) <= man_2d_distance(a, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_att_bounds(a, b):
    r = math.dist(a, b) / math.sqrt(10.0)
    d = att_distance(a, b)
    assert r - 1e-9 <= d < r + 1


def test_euc_2d_pythagorean_triple():
    assert euc_2d_distance((0.0, 0.0), (3.0, 4.0)) == 5.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_geo_is_symmetric(a, b):
    assert geo_distance(a, b) == geo_distance(b, a)


@pytest.mark.parametrize("p", POINTS)
def test_geo_same_point_adds_one(p):
    assert geo_distance(p, p) == 1.0


@pytest.mark.parametrize(
    "kind,func",
    [
        (EdgeWeightType.EUC_2D, euc_2d_distance),
        (EdgeWeightType.MAX_2D, max_2d_distance),
        (EdgeWeightType.MAN_2D, man_2d_distance),
        (EdgeWeightType.CEIL_2D, ceil_2d_distance),
        (EdgeWeightType.GEO, geo_distance),
        (EdgeWeightType.ATT, att_distance),
    ],
)
def test_distance_function_lookup(kind, func):
    assert distance_function(kind) is func
    assert distance_function(int(kind)) is func


@pytest.mark.parametrize(
    "kind",
    [
        EdgeWeightType.EXPLICIT,
        EdgeWeightType.EUC_3D,
        EdgeWeightType.MAX_3D,
        EdgeWeightType.MAN_3D,
        42,
    ],
)
def test_distance_function_unsupported(kind):
    with pytest.raises(ValueError):
        distance_function(kind)


@pytest.mark.parametrize(
    "index,name,expected",
    [
        (0, "EXPLICIT", None),
        (1, "EUC_2D", euc_2d_distance),
        (2, "EUC_3D", None),
        (3, "MAX_2D", max_2d_distance),
        (4, "MAX_3D", None),
        (5, "MAN_2D", man_2d_distance),
        (6, "MAN_3D", None),
        (7, "CEIL_2D", ceil_2d_distance),
        (8, "GEO", geo_distance),
        (9, "ATT", att_distance),
    ],
)
def test_edge_weight_type_keyword_order(index, name, expected):
    assert EdgeWeightType[name] == index
    if expected is None:
        with pytest.raises(ValueError):
            distance_function(index)
    else:
        assert distance_function(index) is expected
        assert distance_function(EdgeWeightType[name]) is expected