"""A chart box: a group of point series sharing one pair of axes."""

from __future__ import annotations

import itertools
import math
import sys
import threading
from typing import Iterable, Mapping

from ddsmonitor.data_model import DataModel, Point

Y_MAX_DEFAULT = -sys.float_info.max
Y_MIN_DEFAULT = sys.float_info.max
X_MAX_DEFAULT = 0
X_MIN_DEFAULT = 2**64 - 1


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(float(math.floor(abs(value) + 0.5)), value)


class DataChartBox:
    """Holds several series, tracks their axis limits and routes new points."""

    _id_counter = itertools.count()
    _id_lock = threading.Lock()

    def __init__(self, data_kind: str, max_points: int = 0) -> None:
        self.data_kind = data_kind
        self.max_points = max_points
        self.round_axis = False
        self._series: dict[int, DataModel] = {}
        self._series_ids: list[int] = []
        self._lock = threading.RLock()
        self._axis_y_max: float = Y_MAX_DEFAULT
        self._axis_y_min: float = Y_MIN_DEFAULT
        self._axis_x_max: int = X_MAX_DEFAULT
        self._axis_x_min: int = X_MIN_DEFAULT

    # Axis limits

    @property
    def axis_y_max(self) -> float:
        return self._axis_y_max

    @axis_y_max.setter
    def axis_y_max(self, value: float) -> None:
        self._axis_y_max = _round_half_away(value) if self.round_axis else value

    @property
    def axis_y_min(self) -> float:
        return self._axis_y_min

    @axis_y_min.setter
    def axis_y_min(self, value: float) -> None:
        self._axis_y_min = _round_half_away(value) if self.round_axis else value

    @property
    def axis_x_max(self) -> int:
        return self._axis_x_max

    @axis_x_max.setter
    def axis_x_max(self, value: int) -> None:
        self._axis_x_max = value

    @property
    def axis_x_min(self) -> int:
        return self._axis_x_min

    @axis_x_min.setter
    def axis_x_min(self, value: int) -> None:
        self._axis_x_min = value

    @property
    def series_ids(self) -> list[int]:
        """Unique ids of the series, in creation order."""
        with self._lock:
            return list(self._series_ids)

    # Series handling

    @classmethod
    def _next_series_id(cls) -> int:
        with cls._id_lock:
            return next(cls._id_counter)

    def _add_series(self, data_model: DataModel) -> int:
        """Register ``data_model`` as a new series and return its unique id."""
        with self._lock:
            new_id = self._next_series_id()
            self._series[new_id] = data_model
            self._series_ids.append(new_id)
            return new_id

    def _real_id(self, series_order_index: int) -> int:
        if not 0 <= series_order_index < len(self._series_ids):
            raise IndexError(
                f"series {series_order_index} does not exist in chartbox "
                f"with {len(self._series_ids)} series"
            )
        return self._series_ids[series_order_index]

    def update(self, new_data: Mapping[int, Iterable[Point]]) -> None:
        """Append sorted points to the series given by their unique ids."""
        with self._lock:
            for series_id, points in new_data.items():
                try:
                    model = self._series[series_id]
                except KeyError:
                    raise KeyError(f"no series with id {series_id}") from None
                for point in points:
                    model.handle_new_point(point)
                    # X is not tracked here to keep updates cheap.
                    self.new_y_value(point.y)

    def delete_series_by_order_index(self, series_order_index: int) -> None:
        """Delete the series at position ``series_order_index`` among the current ones."""
        with self._lock:
            real_id = self._real_id(series_order_index)
            del self._series[real_id]
            del self._series_ids[series_order_index]

    def clear_charts(self) -> None:
        """Remove every series and reset both axes."""
        with self._lock:
            self._series.clear()
            self._series_ids.clear()
            self.reset_axis()

    def new_y_value(self, y: float) -> None:
        """Widen the Y axis so that it includes ``y``."""
        if y > self._axis_y_max:
            self.axis_y_max = y
        if y < self._axis_y_min:
            self.axis_y_min = y

    def new_x_value(self, x: int) -> None:
        """Widen the X axis so that it includes ``x``."""
        if x > self._axis_x_max:
            self.axis_x_max = x
        if x < self._axis_x_min:
            self.axis_x_min = x

    def get_data(self, series_index: int) -> list[Point]:
        """Return the points of the series at position ``series_index``."""
        with self._lock:
            return self._series[self._real_id(series_index)].get_data()

    def reset_axis(self, x_axis: bool = True, y_axis: bool = True) -> None:
        if x_axis:
            self.axis_x_max = X_MAX_DEFAULT
            self.axis_x_min = X_MIN_DEFAULT
        if y_axis:
            self.axis_y_max = Y_MAX_DEFAULT
            self.axis_y_min = Y_MIN_DEFAULT

    def recalculate_y_axis(self) -> None:
        """Reset the Y axis and fit it to the values of every non-empty series."""
        with self._lock:
            self.reset_axis(x_axis=False, y_axis=True)
            for model in self._series.values():
                if model.get_size():
                    low, high = model.limit_y_value()
                    self.new_y_value(low)
                    self.new_y_value(high)

    def set_max_points(self, series_order_index: int, max_points: int) -> None:
        """Cap the number of points kept by the series at ``series_order_index``."""
        with self._lock:
            self._series[self._real_id(series_order_index)].set_max_points(max_points)