import logging

from typing import Iterable

from geometry import EPSILON, Point, PolarComparator

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """
    Raised when an ordering is requested for an empty set of points.
    """


def find_anchor(points: list[Point], eps: float = EPSILON) -> int:
    """
    Find index of the anchor point: the lowest point by y, and the leftmost
    one among points lying within eps from the current lowest y.

    Note that only y is compared with tolerance, ties by x are resolved exactly.
    """
    if len(points) == 0:
        raise EmptyInputError("Cannot find anchor of an empty set of points")

    lowest_idx = 0
    lowest = points[0]
    for idx, point in enumerate(points):
        if abs(point.y - lowest.y) < eps:
            if point.x < lowest.x:
                lowest, lowest_idx = point, idx
        elif point.y < lowest.y:
            lowest, lowest_idx = point, idx
    return lowest_idx


def order_points(points: Iterable[Point], eps: float = EPSILON) -> list[Point]:
    """
    Order points by polar angle around the anchor point (see `find_anchor`).

    Returns a new list with the anchor on the first position followed by
    the rest of the points in non-decreasing polar angle order.
    The input is not modified. Collinear points keep their input order,
    so the result is deterministic for a given input.

    Points with NaN coordinates compare as collinear to everything,
    their position in the result is unspecified.

    Time complexity: O(n*log(n)).
    """
    remaining = list(points)
    anchor_idx = find_anchor(remaining, eps=eps)
    anchor = remaining.pop(anchor_idx)

    remaining.sort(key=PolarComparator(anchor, eps=eps).key())
    logger.debug("Ordered %d points around anchor %s", len(remaining) + 1, anchor)
    return [anchor] + remaining
