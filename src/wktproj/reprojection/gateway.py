import logging
from typing import List, Sequence

from wktproj.core.errors import ReprojectionFailed
from wktproj.core.geometry import Geometry
from wktproj.core.point import Point
from wktproj.reprojection.base import ReprojectionConfig, Reprojector

logger = logging.getLogger(__name__)


class ReprojectionGateway:
    """
    Hands a Geometry's points to a Reprojector and rebuilds a Geometry of the
    same variant from what comes back. No coordinate math happens here.
    """

    def __init__(self, reprojector: Reprojector, config: ReprojectionConfig):
        """
        Args:
            reprojector: The engine doing the actual transformation.
            config: CRS pair, axis order and precision for this leg.
        """
        self.reprojector = reprojector
        self.config = config

    def reverse(self) -> "ReprojectionGateway":
        """Gateway for the return leg, using the same engine."""
        return ReprojectionGateway(self.reprojector, self.config.reversed())

    def reproject_points(self, points: Sequence[Point]) -> List[Point]:
        """
        Reprojects raw points in order. The engine must return exactly one
        point per input point.
        """
        cfg = self.config
        transformed = self.reprojector.reproject(
            points,
            cfg.from_crs,
            cfg.to_crs,
            axis_order=cfg.axis_order,
            precision=cfg.precision,
        )
        if len(transformed) != len(points):
            raise ReprojectionFailed(
                f"Expected {len(points)} points back from {cfg.from_crs} -> {cfg.to_crs}, got {len(transformed)}"
            )
        return transformed

    def reproject(self, geometry: Geometry) -> Geometry:
        """
        Reprojects a Geometry, keeping its variant and point order.
        2D variants lose the wire z again; Z variants keep the engine's z, or
        the original z if the engine only returned two columns.
        """
        transformed = self.reproject_points(geometry.points)

        points = []
        for original, moved in zip(geometry.points, transformed):
            if geometry.has_z:
                z = moved.z if moved.z is not None else original.z
            else:
                z = None
            points.append(Point(x=moved.x, y=moved.y, z=z))

        logger.debug(
            "Reprojected %s with %d points %s -> %s",
            geometry.geometry_type.name, len(points), self.config.from_crs, self.config.to_crs
        )
        return geometry.with_points(points)
