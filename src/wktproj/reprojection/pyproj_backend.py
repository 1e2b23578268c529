import logging
from functools import lru_cache
from typing import List, Sequence

import numpy as np
from pyproj import Transformer
from pyproj.exceptions import ProjError

from wktproj.core.errors import ReprojectionFailed
from wktproj.core.point import Point
from wktproj.reprojection.base import DEFAULT_PRECISION, AxisOrder, Reprojector, wire_row

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def _transformer(from_crs: str, to_crs: str) -> Transformer:
    # always_xy stays False: axes follow the CRS authority, as cs2cs does.
    return Transformer.from_crs(from_crs, to_crs, always_xy=False)


class PyprojReprojector(Reprojector):
    """
    In-process reprojection through pyproj, speaking the same row protocol as
    Cs2csReprojector: rows go in as (y, x, z) and come out as (x, y, z),
    with the same independent swap flags and output rounding.
    """

    def reproject(
        self,
        points: Sequence[Point],
        from_crs: str,
        to_crs: str,
        axis_order: AxisOrder = AxisOrder.NORMAL,
        precision: int = DEFAULT_PRECISION,
    ) -> List[Point]:
        if not points:
            return []

        rows = np.array([wire_row(p) for p in points], dtype=float)
        first, second, z = rows[:, 0], rows[:, 1], rows[:, 2]
        if axis_order.swap_input:
            first, second = second, first

        try:
            transformer = _transformer(from_crs, to_crs)
            out_first, out_second, out_z = transformer.transform(first, second, z, errcheck=True)
        except ProjError as exc:
            raise ReprojectionFailed(f"pyproj could not transform {from_crs} -> {to_crs}: {exc}") from exc

        out = np.column_stack([out_first, out_second, out_z])
        if axis_order.swap_output:
            out[:, [0, 1]] = out[:, [1, 0]]
        if not np.all(np.isfinite(out)):
            raise ReprojectionFailed(f"pyproj produced non-finite coordinates for {from_crs} -> {to_crs}")

        out = np.round(out, precision)
        logger.debug("Reprojected %d points %s -> %s", len(points), from_crs, to_crs)
        return [Point(x=float(x), y=float(y), z=float(zz)) for x, y, zz in out]
