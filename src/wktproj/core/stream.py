import pandas as pd
from typing import Iterator
from pathlib import Path

from wktproj.core.geometry import Geometry
from wktproj.wkt.parser import WktParser


def read_wkt_file(filepath: str | Path, parser: WktParser | None = None) -> Geometry:
    """
    Reads a plain text file holding a single WKT literal (e.g. a long
    linestring fixture) and parses it.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    parser = parser or WktParser()
    return parser.parse(path.read_text(encoding="utf-8").strip())


class WktStream:
    """
    Reads a delimited file with one WKT literal per row and yields geometries
    one by one, so large tables never have to fit in memory.
    """
    def __init__(
        self,
        filepath: str | Path,
        sep: str = ',',
        wkt_column: str = 'wkt',
        chunksize: int = 1000,
        parser: WktParser | None = None
    ):
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")

        self.sep = sep
        self.wkt_column = wkt_column
        self.chunksize = chunksize
        self.parser = parser or WktParser()

    def __iter__(self) -> Iterator[Geometry]:
        return self.stream()

    def stream(self) -> Iterator[Geometry]:
        """
        Yields geometries in file order.
        A row that does not parse raises instead of being skipped.
        """
        header = pd.read_csv(self.filepath, nrows=0, sep=self.sep)
        if self.wkt_column not in header.columns:
            raise ValueError(
                f"File must contain a '{self.wkt_column}' column. Found: {list(header.columns)}"
            )

        with pd.read_csv(
            self.filepath,
            chunksize=self.chunksize,
            sep=self.sep,
            usecols=[self.wkt_column],
            dtype={self.wkt_column: str}
        ) as reader:
            for chunk in reader:
                for text in chunk[self.wkt_column]:
                    yield self.parser.parse(text)
