class WktprojError(Exception):
    """Base class for every error raised by wktproj."""


class UnsupportedFormat(WktprojError, ValueError):
    """
    The input text matches none of the supported WKT variants, or matches one
    whose point count cannot form a valid geometry.
    """

    def __init__(self, text: str, reason: str | None = None):
        self.text = text
        self.reason = reason
        message = f"Unsupported format: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedCoordinate(WktprojError, ValueError):
    """A variant was recognized but one of its coordinate tokens is not a number."""

    def __init__(self, token: str, position: tuple[int, int], text: str):
        self.token = token
        self.position = position
        self.text = text
        point_index, axis_index = position
        super().__init__(
            f"Malformed coordinate {token!r} at point {point_index}, axis {axis_index} in {text!r}"
        )


class ReprojectionFailed(WktprojError, RuntimeError):
    """
    The external reprojection engine exited non-zero, emitted something that
    is not a coordinate row, or returned a different number of rows.
    """

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class GeometryInvariantViolation(WktprojError, ValueError):
    """A Geometry was constructed with points its variant does not allow."""
