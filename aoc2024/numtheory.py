"""Small number-theory and geometry helpers shared by the puzzle solutions."""

from collections.abc import Iterable


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers.

    Uses Euclid's algorithm. A zero ``b`` raises ZeroDivisionError.
    """
    if a < 0 or b < 0:
        raise ValueError("gcd takes non-negative integers")
    while True:
        a %= b
        if a == 0:
            return b
        b %= a
        if b == 0:
            return a


def shoelace(polygon: Iterable[tuple[int, int]]) -> int:
    """Return the area of a polygon given as (row, col) vertices, rounded down.

    The vertices are taken in order and the polygon is closed implicitly.
    """
    points = list(polygon)
    if not points:
        raise ValueError("polygon has no points")
    closing = points[1:] + points[:1]
    twice_area = sum(
        r1 * c2 - c1 * r2 for (r1, c1), (r2, c2) in zip(points, closing)
    )
    return abs(twice_area) >> 1