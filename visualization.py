import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from geometry import Point
from polar_order import EmptyInputError


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y)
    else:
        ax.scatter(x, y)


def plot_polar_order(ordered: list[Point], ax: Axes | None = None) -> Axes:
    """
    Plot points ordered by `order_points`: a ray from the anchor
    to every other point, and the position in the ordering near each point.
    """
    if len(ordered) == 0:
        raise EmptyInputError("Nothing to plot")
    if ax is None:
        ax = plt.gca()

    anchor = ordered[0]
    for pt in ordered[1:]:
        ax.plot([anchor.x, pt.x], [anchor.y, pt.y], c='tab:gray', lw=0.5)
    for i, pt in enumerate(ordered):
        ax.text(pt.x, pt.y, s=str(i))

    plot_points(ordered[1:], ax=ax)
    ax.scatter([anchor.x], [anchor.y], c='r')
    ax.grid()
    return ax
