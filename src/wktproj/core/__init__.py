from .errors import (
    GeometryInvariantViolation,
    MalformedCoordinate,
    ReprojectionFailed,
    UnsupportedFormat,
    WktprojError,
)
from .geometry import Geometry, GeometryType
from .point import Point
