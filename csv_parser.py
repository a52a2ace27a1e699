"""Two-column CSV parsing for (x, y) datasets"""
import math
from typing import List, Optional

from config import DataPoint


class CSVParser:
    """Parse `x,y` lines into DataPoints, dropping malformed rows"""

    def parse(self, text: str) -> List[DataPoint]:
        """
        Extract data points from CSV text.

        Args:
            text: Raw CSV content, one `x,y` pair per line

        Returns:
            Accepted points in input order (possibly empty)
        """
        points = []
        for line in text.strip().splitlines():
            if not line.strip():
                continue
            point = self._parse_line(line)
            if point is not None:
                points.append(point)
        return points

    def serialize(self, points: List[DataPoint]) -> str:
        """Write points back as `x,y` lines that parse() reads unchanged."""
        return "\n".join(f"{p.x!r},{p.y!r}" for p in points)

    @staticmethod
    def _parse_line(line: str) -> Optional[DataPoint]:
        fields = line.split(",")
        if len(fields) != 2:
            return None
        # float() also takes PEP 515 digit separators such as "1_2"
        if any("_" in f for f in fields):
            return None
        try:
            x, y = float(fields[0]), float(fields[1])
        except ValueError:
            return None
        # float() accepts "nan" and "inf"
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        return DataPoint(x=x, y=y)
