import abc
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from wktproj.core.point import Point

DEFAULT_PRECISION = 12


class AxisOrder(Enum):
    """
    Axis-swap flags handed to the reprojection engine.
    Input and output swaps are independent.
    """
    NORMAL = (False, False)
    SWAPPED_INPUT = (True, False)
    SWAPPED_OUTPUT = (False, True)
    SWAPPED_BOTH = (True, True)

    @property
    def swap_input(self) -> bool:
        return self.value[0]

    @property
    def swap_output(self) -> bool:
        return self.value[1]


@dataclass(frozen=True)
class ReprojectionConfig:
    """
    Parameters of one reprojection leg.

    Attributes:
        from_crs: Source CRS identifier, e.g. "EPSG:4326".
        to_crs: Destination CRS identifier.
        axis_order: Swap flags for the input and output streams.
        precision: Number of decimals the engine writes.
    """
    from_crs: str
    to_crs: str
    axis_order: AxisOrder = AxisOrder.NORMAL
    precision: int = DEFAULT_PRECISION

    def __post_init__(self):
        if not self.from_crs or not self.to_crs:
            raise ValueError("Both from_crs and to_crs must be given.")
        if self.precision < 0:
            raise ValueError(f"Precision must be non-negative, got {self.precision}.")

    def reversed(self, axis_order: AxisOrder = AxisOrder.SWAPPED_BOTH) -> "ReprojectionConfig":
        """
        Config for the return leg. Points come back in the engine's output
        order, so by default both streams are swapped to restore (x, y).
        """
        return ReprojectionConfig(
            from_crs=self.to_crs,
            to_crs=self.from_crs,
            axis_order=axis_order,
            precision=self.precision,
        )


class Reprojector(abc.ABC):
    """Abstract base class for reprojection engines."""

    @abc.abstractmethod
    def reproject(
        self,
        points: Sequence[Point],
        from_crs: str,
        to_crs: str,
        axis_order: AxisOrder = AxisOrder.NORMAL,
        precision: int = DEFAULT_PRECISION,
    ) -> List[Point]:
        """
        Returns the transformed points, one per input point and in the same order.
        Raises ReprojectionFailed when the engine cannot deliver that.
        """
        pass


def wire_row(point: Point) -> tuple[float, float, float]:
    """
    A point as the engine receives it: (y, x, z), with a missing z sent as 0.
    """
    return (point.y, point.x, point.z if point.z is not None else 0.0)
