from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    Represents a single vertex (x, y, z).
    z is None for 2D geometries; a missing z is never the same thing as z == 0.0.
    """
    x: float
    y: float
    z: float | None = None

    @property
    def has_z(self) -> bool:
        return self.z is not None

    @property
    def tuple(self):
        return (self.x, self.y, self.z)
