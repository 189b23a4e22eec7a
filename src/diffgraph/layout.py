"""Circular node layout."""

import math
from typing import List, Tuple

from diffgraph.model import LayoutPoint


def circular_layout(n: int, center: Tuple[float, float], radius: float) -> List[LayoutPoint]:
    """
    Place n points evenly on a circle, in index order.

    Point i sits at angle 2*pi*i/n, starting on the positive x axis.

    Args:
        n: Number of points
        center: (x, y) of the circle center
        radius: Circle radius

    Returns:
        List of LayoutPoint (empty when n == 0)

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Point count must be >= 0, got {n}")
    if n == 0:
        return []

    cx, cy = center
    points = []
    for i in range(n):
        angle = 2 * math.pi * i / n
        points.append(LayoutPoint(
            x=cx + radius * math.cos(angle),
            y=cy + radius * math.sin(angle),
        ))
    return points


__all__ = ["circular_layout"]
