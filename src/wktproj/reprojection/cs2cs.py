import logging
import subprocess
from typing import List, Sequence

import numpy as np

from wktproj.core.errors import ReprojectionFailed
from wktproj.core.point import Point
from wktproj.reprojection.base import DEFAULT_PRECISION, AxisOrder, Reprojector, wire_row

logger = logging.getLogger(__name__)


class Cs2csReprojector(Reprojector):
    """
    Runs PROJ's cs2cs as an external process.

    Points are written to its stdin one per line as "y x z" and read back from
    stdout in the same order. cs2cs does all of the coordinate math.
    """

    def __init__(self, executable: str = "cs2cs"):
        """
        Args:
            executable: Name or path of the cs2cs binary.
        """
        self.executable = executable

    def build_command(
        self,
        from_crs: str,
        to_crs: str,
        axis_order: AxisOrder = AxisOrder.NORMAL,
        precision: int = DEFAULT_PRECISION,
    ) -> List[str]:
        command = [self.executable, "-d", str(precision)]
        if axis_order.swap_input:
            command.append("-r")
        if axis_order.swap_output:
            command.append("-s")
        command.extend([from_crs, to_crs])
        return command

    @staticmethod
    def encode_rows(points: Sequence[Point]) -> str:
        return "\n".join(
            " ".join(np.format_float_positional(float(v), trim='-') for v in wire_row(p))
            for p in points
        )

    @staticmethod
    def decode_rows(output: str, expected_count: int, stderr: str = "") -> List[Point]:
        """
        Parses the engine's stdout back into points.
        Each row holds 2 or 3 numeric columns (x y [z]). Whatever the engine
        wrote to stderr is attached to any ReprojectionFailed raised here.
        """
        rows = [line for line in output.splitlines() if line.strip()]
        if len(rows) != expected_count:
            raise ReprojectionFailed(
                f"Expected {expected_count} output rows, got {len(rows)}",
                stderr=stderr,
            )

        points = []
        for index, row in enumerate(rows):
            tokens = row.split()
            if len(tokens) not in (2, 3):
                raise ReprojectionFailed(
                    f"Row {index} has {len(tokens)} columns: {row!r}", stderr=stderr
                )
            try:
                values = [float(token) for token in tokens]
            except ValueError:
                raise ReprojectionFailed(f"Row {index} is not numeric: {row!r}", stderr=stderr) from None

            z = values[2] if len(values) == 3 else None
            points.append(Point(x=values[0], y=values[1], z=z))
        return points

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

        command = self.build_command(from_crs, to_crs, axis_order, precision)
        logger.debug("Running %s on %d points", " ".join(command), len(points))

        # run() drains both pipes and waits for the exit status on every path.
        try:
            result = subprocess.run(
                command,
                input=self.encode_rows(points) + "\n",
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ReprojectionFailed(f"Could not start {self.executable}: {exc}") from exc

        if result.returncode != 0:
            raise ReprojectionFailed(
                f"{self.executable} exited with status {result.returncode}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return self.decode_rows(result.stdout, len(points), stderr=result.stderr)
