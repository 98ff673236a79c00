"""Distance functions for TSPLIB edge weight types."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Tuple

Coord = Tuple[float, float]
DistanceFunction = Callable[[Coord, Coord], float]

TSPLIB_PI = 3.141592
EARTH_RADIUS = 6378.388


class EdgeWeightType(IntEnum):
    """TSPLIB edge weight types, numbered in keyword order."""

    EXPLICIT = 0
    EUC_2D = 1
    EUC_3D = 2
    MAX_2D = 3
    MAX_3D = 4
    MAN_2D = 5
    MAN_3D = 6
    CEIL_2D = 7
    GEO = 8
    ATT = 9


def nint(x: float) -> int:
    """Round to the nearest integer the TSPLIB way: add one half and truncate."""
    return int(x + 0.5)


def dtrunc(x: float) -> float:
    """Truncate towards zero, returning a float."""
    return float(int(x))


def radian_coords(coord: Coord) -> tuple[float, float]:
    """Convert a DDD.MM geographic coordinate pair to (longitude, latitude) in radians."""
    x, y = coord

    deg_x = dtrunc(x)
    min_x = x - deg_x
    latitude = TSPLIB_PI * (deg_x + 5.0 * min_x / 3.0) / 180.0

    deg_y = dtrunc(y)
    min_y = y - deg_y
    longitude = TSPLIB_PI * (deg_y + 5.0 * min_y / 3.0) / 180.0

    return longitude, latitude


def euc_2d_distance(a: Coord, b: Coord) -> float:
    """Rounded two-dimensional Euclidean distance."""
    xd = a[0] - b[0]
    yd = a[1] - b[1]
    return float(nint(math.sqrt(xd * xd + yd * yd)))


def max_2d_distance(a: Coord, b: Coord) -> float:
    """Two-dimensional maximum metric, each axis rounded."""
    xd = abs(a[0] - b[0])
    yd = abs(a[1] - b[1])
    return float(max(nint(xd), nint(yd)))


def man_2d_distance(a: Coord, b: Coord) -> float:
    """Rounded two-dimensional Manhattan distance."""
    xd = abs(a[0] - b[0])
    yd = abs(a[1] - b[1])
    return float(nint(xd + yd))


def ceil_2d_distance(a: Coord, b: Coord) -> float:
    """Two-dimensional Euclidean distance rounded up."""
    xd = a[0] - b[0]
    yd = a[1] - b[1]
    return float(math.ceil(math.sqrt(xd * xd + yd * yd)))


def geo_distance(a: Coord, b: Coord) -> float:
    """Geographic distance in kilometres between two DDD.MM coordinates."""
    longitude_a, latitude_a = radian_coords(a)
    longitude_b, latitude_b = radian_coords(b)

    q1 = math.cos(longitude_a - longitude_b)
    q2 = math.cos(latitude_a - latitude_b)
    q3 = math.cos(latitude_a + latitude_b)

    acos_arg = 0.5 * ((1.0 + q1) * q2 - (1.0 - q1) * q3)
    acos_arg = min(1.0, max(-1.0, acos_arg))

    return float(int(EARTH_RADIUS * math.acos(acos_arg) + 1.0))


def att_distance(a: Coord, b: Coord) -> float:
    """Pseudo-Euclidean distance used by the att instances."""
    xd = a[0] - b[0]
    yd = a[1] - b[1]
    rij = math.sqrt((xd * xd + yd * yd) / 10.0)
    tij = float(nint(rij))
    return tij + 1.0 if tij < rij else tij


_FUNCTIONS: dict[EdgeWeightType, DistanceFunction] = {
    EdgeWeightType.EUC_2D: euc_2d_distance,
    EdgeWeightType.MAX_2D: max_2d_distance,
    EdgeWeightType.MAN_2D: man_2d_distance,
    EdgeWeightType.CEIL_2D: ceil_2d_distance,
    EdgeWeightType.GEO: geo_distance,
    EdgeWeightType.ATT: att_distance,
}


def distance_function(edge_weight_type: EdgeWeightType | int) -> DistanceFunction:
    """Return the distance function for an edge weight type.

    Raises ValueError for types that are not computed from coordinates.
    """
    try:
        kind = EdgeWeightType(edge_weight_type)
    except ValueError:
        raise ValueError(f"unknown edge weight type: {edge_weight_type!r}") from None
    try:
        return _FUNCTIONS[kind]
    except KeyError:
        raise ValueError(
            f"edge weight type {kind.name} has no coordinate distance function"
        ) from None