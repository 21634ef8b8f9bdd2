import math
import numpy as np

from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key


EPSILON = 1e-9


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    eps = EPSILON

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        x_eq = y_eq = False
        if math.isfinite(self.x) and math.isfinite(other.x):
            x_eq = abs(self.x - other.x) < self.eps
        else:
            x_eq = self.x == other.x
        if math.isfinite(self.y) and math.isfinite(other.y):
            y_eq = abs(self.y - other.y) < self.eps
        else:
            y_eq = self.y == other.y
        return x_eq and y_eq

    def __iter__(self):
        yield self.x
        yield self.y


class Ordering(IntEnum):
    """
    Result of a polar angle comparison.
    Integer values make it usable as a `cmp_to_key` comparator result.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def distance(p1: Point, p2: Point) -> float:
    """
    Squared euclidean distance between two points.
    Non-finite coordinates propagate as usual for floats.
    """
    return (p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2


def compare(a: Point, b: Point, base: Point, eps: float = EPSILON) -> Ordering:
    """
    Compare polar angles of points a and b with respect to base point
    and the positive x-axis.

    The sign is taken from the cross product of vectors (a -> base) and (a -> b),
    positive means that a has greater polar angle than b.
    Cross products inside [-eps, eps] (or NaN) are treated as collinear.
    """
    cross_prod = cross(a, base, b)
    if cross_prod > eps:
        return Ordering.GREATER
    elif cross_prod < -eps:
        return Ordering.LESS
    return Ordering.EQUAL


class PolarComparator:
    """
    Polar angle comparator bound to a fixed base point.

    Note that for eps > 0 the order is not transitive for near-collinear
    triples lying across the tolerance band.
    """

    def __init__(self, base: Point, eps: float = EPSILON):
        self.base = base
        self.eps = eps

    def __call__(self, a: Point, b: Point) -> Ordering:
        return compare(a, b, self.base, eps=self.eps)

    def key(self):
        return cmp_to_key(self)


def points_from_array(array) -> list[Point]:
    """
    Convert an (n, 2) array-like of coordinates into points.
    """
    coords = np.asarray(array, dtype=float)
    if coords.size == 0:
        return []
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected array of shape (n, 2), got {coords.shape}")
    return [Point(float(x), float(y)) for x, y in coords]
