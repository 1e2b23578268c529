from typing import Iterable, Iterator

from wktproj.core.geometry import Geometry
from wktproj.reprojection.gateway import ReprojectionGateway
from wktproj.wkt.builder import NumberFormat, WktBuilder
from wktproj.wkt.parser import WktParser


def reproject_wkt(
    text: str,
    gateway: ReprojectionGateway,
    builder: WktBuilder | None = None,
    parser: WktParser | None = None
) -> str:
    """
    text -> parse -> reproject -> build.
    The builder defaults to VERBATIM numbers, since every coordinate now
    comes from the reprojection engine.
    """
    parser = parser or WktParser()
    builder = builder or WktBuilder(NumberFormat.VERBATIM)
    return builder.build(gateway.reproject(parser.parse(text)))


class ReprojectedStreamWrapper:
    """
    Wraps an existing stream of geometries and reprojects each one as it
    flows through.
    """

    def __init__(self, geometry_stream: Iterable[Geometry], gateway: ReprojectionGateway):
        """
        Args:
            geometry_stream: Any iterable of Geometry objects, e.g. a WktStream.
            gateway: An initialized ReprojectionGateway.
        """
        self.geometry_stream = geometry_stream
        self.gateway = gateway

    def __iter__(self) -> Iterator[Geometry]:
        return self.stream()

    def stream(self) -> Iterator[Geometry]:
        for geometry in self.geometry_stream:
            yield self.gateway.reproject(geometry)
