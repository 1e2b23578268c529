import math
from typing import Dict, List, Sequence

import numpy as np

from wktproj.core.point import Point


def _floor_to(value: float, decimals: int) -> float:
    factor = 10.0 ** decimals
    return math.floor(value * factor) / factor


def points_almost_equal(a: Point, b: Point, xy_decimals: int = 6, z_decimals: int = 12) -> bool:
    """
    Compares two points produced by floating-point computation.

    Args:
        a, b: The points to compare.
        xy_decimals: x and y must agree within 10**-xy_decimals.
        z_decimals: z values are floored to this many decimals and must then be equal.
            A missing z only equals another missing z.

    Returns:
        True if the points are equal under the tolerance.
    """
    tolerance = 10.0 ** -xy_decimals
    if abs(a.x - b.x) > tolerance or abs(a.y - b.y) > tolerance:
        return False

    if a.z is None or b.z is None:
        return a.z is None and b.z is None
    return _floor_to(a.z, z_decimals) == _floor_to(b.z, z_decimals)


def assert_points_almost_equal(
    actual: Sequence[Point],
    expected: Sequence[Point],
    xy_decimals: int = 6,
    z_decimals: int = 12
):
    """
    Raises AssertionError naming the first point that differs.
    """
    if len(actual) != len(expected):
        raise AssertionError(f"Expected {len(expected)} points, got {len(actual)}")

    for index, (a, e) in enumerate(zip(actual, expected)):
        if not points_almost_equal(a, e, xy_decimals, z_decimals):
            raise AssertionError(f"Point {index} differs: {a} != {e}")


def calculate_deviation_stats(expected: Sequence[Point], actual: Sequence[Point]) -> Dict[str, float | List[float]]:
    """
    Planar deviation between two point sequences of the same length.

    Metrics:
    - max_xy: Largest distance between corresponding points.
    - mean_xy: Mean distance.
    - rmse_xy: Root Mean Square Error.

    Returns:
        Dictionary containing 'max_xy', 'mean_xy', 'rmse_xy', and 'deviations'.
    """
    if len(expected) != len(actual):
        raise ValueError(f"Point sequences differ in length: {len(expected)} != {len(actual)}")
    if not expected:
        return {'max_xy': 0.0, 'mean_xy': 0.0, 'rmse_xy': 0.0, 'deviations': []}

    e = np.array([(p.x, p.y) for p in expected], dtype=float)
    a = np.array([(p.x, p.y) for p in actual], dtype=float)
    deviations = np.hypot(a[:, 0] - e[:, 0], a[:, 1] - e[:, 1])

    return {
        'max_xy': float(deviations.max()),
        'mean_xy': float(deviations.mean()),
        'rmse_xy': float(np.sqrt(np.mean(deviations ** 2))),
        'deviations': deviations.tolist()
    }
