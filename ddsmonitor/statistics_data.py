"""A registry of chart boxes addressed by unique id."""

from __future__ import annotations

import itertools
import threading

from ddsmonitor.chartbox import DataChartBox
from ddsmonitor.data_model import Point


class StatisticsData:
    """Keeps chart boxes by id and forwards per-box operations to them."""

    _id_counter = itertools.count()
    _id_lock = threading.Lock()

    def __init__(self) -> None:
        self._chartboxes: dict[int, DataChartBox] = {}

    def _add_chartbox(self, chartbox: DataChartBox) -> int:
        """Register ``chartbox`` and return its new unique id."""
        with StatisticsData._id_lock:
            new_id = next(StatisticsData._id_counter)
        self._chartboxes[new_id] = chartbox
        return new_id

    def _chartbox(self, chartbox_id: int) -> DataChartBox:
        try:
            return self._chartboxes[chartbox_id]
        except KeyError:
            raise KeyError(f"no chartbox with id {chartbox_id}") from None

    def delete_series(self, chartbox_id: int, series_index: int) -> None:
        self._chartbox(chartbox_id).delete_series_by_order_index(series_index)

    def delete_chartbox(self, chartbox_id: int) -> None:
        chartbox = self._chartbox(chartbox_id)
        chartbox.clear_charts()
        del self._chartboxes[chartbox_id]

    def clear_charts(self, chartbox_id: int) -> None:
        self._chartbox(chartbox_id).clear_charts()

    def axis_y_max(self, chartbox_id: int) -> float:
        return self._chartbox(chartbox_id).axis_y_max

    def axis_y_min(self, chartbox_id: int) -> float:
        return self._chartbox(chartbox_id).axis_y_min

    def axis_x_max(self, chartbox_id: int) -> int:
        return self._chartbox(chartbox_id).axis_x_max

    def axis_x_min(self, chartbox_id: int) -> int:
        return self._chartbox(chartbox_id).axis_x_min

    def set_axis_y_max(self, chartbox_id: int, value: float) -> None:
        self._chartbox(chartbox_id).axis_y_max = value

    def set_axis_y_min(self, chartbox_id: int, value: float) -> None:
        self._chartbox(chartbox_id).axis_y_min = value

    def set_axis_x_max(self, chartbox_id: int, value: int) -> None:
        self._chartbox(chartbox_id).axis_x_max = value

    def set_axis_x_min(self, chartbox_id: int, value: int) -> None:
        self._chartbox(chartbox_id).axis_x_min = value

    def new_x_value(self, chartbox_id: int, x: int) -> None:
        self._chartbox(chartbox_id).new_x_value(x)

    def contains_chartbox(self, chartbox_id: int) -> bool:
        return chartbox_id in self._chartboxes

    def get_data(self, chartbox_id: int, series_index: int) -> list[Point]:
        return self._chartbox(chartbox_id).get_data(series_index)

    def recalculate_y_axis(self, chartbox_id: int) -> None:
        self._chartbox(chartbox_id).recalculate_y_axis()

    def set_max_points(self, chartbox_id: int, series_index: int, max_points: int) -> None:
        self._chartbox(chartbox_id).set_max_points(series_index, max_points)