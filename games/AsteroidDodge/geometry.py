"""
Collision and clamping helpers for Asteroid Dodge.

Every collision in the game is a circle test: the player uses half its size
as a radius, hazards and pickups use their size directly.
"""
import math

from models import Point2D


def circles_overlap(center_a: Point2D, radius_a: float,
                    center_b: Point2D, radius_b: float) -> bool:
    """Check whether two circles overlap.

    The test is strict: circles that merely touch do not overlap. A radius
    of 0 is a point; two points never overlap, even when coincident.

    Args:
        center_a: Center of the first circle
        radius_a: Radius of the first circle (>= 0)
        center_b: Center of the second circle
        radius_b: Radius of the second circle (>= 0)

    Returns:
        True if the distance between centers is less than the sum of radii

    Examples:
        >>> circles_overlap(Point2D(x=0, y=0), 5, Point2D(x=8, y=0), 5)
        True
        >>> circles_overlap(Point2D(x=0, y=0), 5, Point2D(x=10, y=0), 5)
        False
    """
    distance = math.hypot(center_b.x - center_a.x, center_b.y - center_a.y)
    return distance < radius_a + radius_b


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))
