"""A series of (x, y) points as shown in a chart."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Iterable

_UINT64_MAX = 2**64 - 1

# Column headers by section; any section other than 0 is the y column.
_HEADERS = {0: "x"}
_DEFAULT_HEADER = "y"


@dataclass(frozen=True)
class Point:
    """A single chart point."""

    x: float
    y: float


class DataModel:
    """Holds the points of one series, optionally capped to a maximum count."""

    def __init__(self, data: Iterable[Point] = (), max_points: int = 0) -> None:
        self._data: deque[Point] = deque(data)
        self.max_points = max_points

    def row_count(self) -> int:
        return len(self._data)

    def column_count(self) -> int:
        return 2

    def header_data(self, section: int) -> str:
        """Return the header of a column: "x" for section 0, "y" otherwise."""
        return _HEADERS.get(section, _DEFAULT_HEADER)

    def data(self, row: int, column: int) -> float:
        if row < 0 or row >= len(self._data):
            raise IndexError(f"row {row} out of range")
        point = self._data[row]
        return point.x if column == 0 else point.y

    def handle_new_point(self, point: Point) -> None:
        """Append a point, dropping the oldest ones beyond ``max_points``."""
        self._data.append(point)
        if self.max_points:
            while len(self._data) > self.max_points:
                self._data.popleft()

    def get_data(self) -> list[Point]:
        return list(self._data)

    def get_size(self) -> int:
        return len(self._data)

    def limit_y_value(self, start: float = 0, end: float = _UINT64_MAX) -> tuple[float, float]:
        """Return ``(min_y, max_y)`` over points with ``start <= x < end``.

        With no matching point the result is ``(float max, lowest float)``.
        """
        min_val = sys.float_info.max
        max_val = -sys.float_info.max
        for point in self._data:
            if start <= point.x < end:
                max_val = max(max_val, point.y)
                min_val = min(min_val, point.y)
        return min_val, max_val

    def set_max_points(self, max_points: int) -> None:
        """Set the cap; it takes effect on the next added point."""
        self.max_points = max_points