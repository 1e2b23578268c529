from typing import List, Sequence

import pytest

from wktproj.core.point import Point
from wktproj.reprojection.base import AxisOrder, Reprojector, wire_row


class ScaleEngine(Reprojector):
    """
    Stand-in for the external engine that follows its row protocol: rows go
    in as (y, x, z), swap flags apply to each stream, and "A" -> "B" doubles
    every planar value while "B" -> "A" halves it. z passes through.
    """

    def __init__(self):
        self.calls = []

    def reproject(
        self,
        points: Sequence[Point],
        from_crs: str,
        to_crs: str,
        axis_order: AxisOrder = AxisOrder.NORMAL,
        precision: int = 12,
    ) -> List[Point]:
        self.calls.append((list(points), from_crs, to_crs, axis_order, precision))
        factor = 2.0 if (from_crs, to_crs) == ("A", "B") else 0.5

        result = []
        for point in points:
            first, second, z = wire_row(point)
            if axis_order.swap_input:
                first, second = second, first
            first, second = first * factor, second * factor
            if axis_order.swap_output:
                first, second = second, first
            result.append(Point(x=first, y=second, z=z))
        return result


@pytest.fixture
def scale_engine():
    return ScaleEngine()
